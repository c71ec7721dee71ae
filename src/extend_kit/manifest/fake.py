"""Fake manifest operations for testing.

FakeManifestStore is an in-memory implementation that accepts pre-configured
state in its constructor.
"""

from pathlib import Path
from typing import Any

from extend_kit.manifest.abc import ManifestStore


class FakeManifestStore(ManifestStore):
    """In-memory fake implementation of manifest operations.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        data: dict[str, Any] | None = None,
        update_error: Exception | None = None,
        init_result: Any = None,
    ) -> None:
        """Create FakeManifestStore with pre-configured state.

        Args:
            data: Manifest data returned from update()
            update_error: Exception raised from update() instead of returning data
            init_result: Value returned from init() (defaults to the merged options)
        """
        self._data = data if data is not None else {"require": {}}
        self._update_error = update_error
        self._init_result = init_result
        self._update_calls = 0
        self._init_calls: list[tuple[Path | str, dict[str, Any]]] = []

    @property
    def update_calls(self) -> int:
        """Number of update() calls. For test assertions only."""
        return self._update_calls

    @property
    def init_calls(self) -> list[tuple[Path | str, dict[str, Any]]]:
        """Arguments of each init() call. For test assertions only."""
        return self._init_calls

    def update(self) -> dict[str, Any]:
        self._update_calls += 1
        if self._update_error is not None:
            raise self._update_error
        return self._data

    def init(self, path: Path | str, options: dict[str, Any]) -> Any:
        self._init_calls.append((path, options))
        if self._init_result is not None:
            return self._init_result
        return options
