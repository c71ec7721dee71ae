"""Production manifest store backed by a JSON file on disk."""

import copy
import json
import logging
from pathlib import Path
from typing import Any

from extend_kit.errors import ManifestParseError
from extend_kit.manifest.abc import ManifestStore

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST: dict[str, Any] = {
    "require": {},
    "minimum-stability": "stable",
    "prefer-stable": True,
    "config": {},
}


class JsonManifestStore(ManifestStore):
    """Reads and writes a composer.json-style manifest.

    The manifest is a JSON object. Only its top-level structure is
    interpreted here; requirement constraints are passed through untouched.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def update(self) -> dict[str, Any]:
        data = self._read() if self._path.exists() else {}

        updated = _with_defaults(data, DEFAULT_MANIFEST)
        if updated != data or not self._path.exists():
            logger.debug("Writing manifest defaults to %s", self._path)
            _write_json(self._path, updated)
        return updated

    def init(self, path: Path | str, options: dict[str, Any]) -> dict[str, Any]:
        target = Path(path)
        data = _deep_merge(copy.deepcopy(DEFAULT_MANIFEST), options)
        logger.debug("Initializing manifest at %s", target)
        _write_json(target, data)
        return data

    def _read(self) -> dict[str, Any]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ManifestParseError(str(self._path), str(e)) from e

        if not isinstance(data, dict):
            raise ManifestParseError(str(self._path), "top level must be a JSON object")
        if "require" in data and not isinstance(data["require"], dict):
            raise ManifestParseError(str(self._path), '"require" must be a JSON object')
        for name, constraint in data.get("require", {}).items():
            if not isinstance(constraint, str):
                raise ManifestParseError(
                    str(self._path), f"constraint for {name!r} must be a string"
                )
        return data


def _with_defaults(data: dict[str, Any], defaults: dict[str, Any]) -> dict[str, Any]:
    result = dict(data)
    for key, value in defaults.items():
        if key not in result:
            result[key] = copy.deepcopy(value)
    return result


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def _write_json(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=4) + "\n", encoding="utf-8")
