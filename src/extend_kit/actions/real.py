"""Executors that run the dependency toolchain CLI."""

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from extend_kit.actions.abc import INSTALLED_TARGET, ActionKind, Executor
from extend_kit.actions.output import ActionOutput
from extend_kit.subprocess_utils import run_subprocess_with_context
from extend_kit.types import InstalledPackageRecord, PackageInfo

logger = logging.getLogger(__name__)

# Toolchain subcommand for each action
TOOLCHAIN_COMMANDS: dict[ActionKind, str] = {
    ActionKind.CHECK: "outdated",
    ActionKind.DEPENDS: "depends",
    ActionKind.AUTOLOAD: "dump-autoload",
    ActionKind.INSTALL: "install",
    ActionKind.PROHIBITS: "prohibits",
    ActionKind.REMOVE: "remove",
    ActionKind.REQUIRE: "require",
    ActionKind.SEARCH: "search",
    ActionKind.SHOW: "show",
    ActionKind.UPDATE: "update",
}


class CommandExecutor(Executor):
    """Runs `<toolchain> <command> <args...>` for one action kind.

    Output of every run is appended to the shared ActionOutput. Returns the
    exit code, except for `show installed` which returns the parsed
    installed package list.
    """

    def __init__(
        self,
        action: ActionKind,
        *,
        toolchain: Sequence[str],
        working_dir: Path,
        output: ActionOutput,
    ) -> None:
        self._action = action
        self._toolchain = list(toolchain)
        self._working_dir = working_dir
        self._output = output

    def execute(self, *args: Any) -> Any:
        if self._action is ActionKind.SHOW:
            return self._show(*args)
        return self._run(_flatten_args(args)).returncode

    def _show(
        self,
        target: str | None = None,
        package: str | None = "",
        version: str | None = "",
        root: bool = False,
    ) -> Any:
        show_args: list[str] = []
        if root:
            show_args.append("--self")
        elif target and target != INSTALLED_TARGET:
            show_args.append(f"--{target}")
        show_args.extend(_flatten_args((package, version)))

        if target == INSTALLED_TARGET and not package and not root:
            show_args.append("--format=json")
            result = self._run(show_args, capture=False)
            return parse_installed_packages(result.stdout)

        return self._run(show_args).returncode

    def _run(self, args: list[str], *, capture: bool = True) -> Any:
        cmd = [
            *self._toolchain,
            TOOLCHAIN_COMMANDS[self._action],
            *args,
            "--no-interaction",
            f"--working-dir={self._working_dir}",
        ]
        logger.debug("Running %s", " ".join(cmd))
        result = run_subprocess_with_context(
            cmd,
            operation_context=f"run {self._action.value} action",
            cwd=self._working_dir,
        )
        if capture:
            self._output.write(result.stdout)
        self._output.write(result.stderr)
        return result


def parse_installed_packages(raw: str) -> list[InstalledPackageRecord]:
    """Parse `show --format=json` output into installed package records.

    Raises:
        ValueError: If the output is not the expected JSON document
    """
    if not raw.strip():
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Unexpected output from show action: {e}") from e

    entries = data.get(INSTALLED_TARGET, []) if isinstance(data, dict) else []
    records: list[InstalledPackageRecord] = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError(f"Invalid package entry in show output: {entry!r}")
        try:
            package = PackageInfo(
                name=entry["name"],
                type=entry.get("type"),
                prettyVersion=entry.get("version", ""),
                description=entry.get("description"),
                authors=entry.get("authors"),
                keywords=entry.get("keywords"),
            )
        except (KeyError, ValidationError) as e:
            raise ValueError(f"Invalid package entry in show output: {e}") from e
        records.append(InstalledPackageRecord(package=package, versions=package.pretty_version))
    return records


def build_action_registry(
    *,
    toolchain: Sequence[str],
    working_dir: Path,
    output: ActionOutput,
) -> dict[ActionKind, Executor]:
    """Bind every action kind to a CommandExecutor sharing one output buffer."""
    return {
        kind: CommandExecutor(kind, toolchain=toolchain, working_dir=working_dir, output=output)
        for kind in ActionKind
    }


def _flatten_args(args: Sequence[Any]) -> list[str]:
    flat: list[str] = []
    for arg in args:
        if arg is None or arg == "":
            continue
        if isinstance(arg, (list, tuple)):
            flat.extend(_flatten_args(arg))
        elif isinstance(arg, bool):
            continue
        else:
            flat.append(str(arg))
    return flat
