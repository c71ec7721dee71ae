from extend_kit.actions.abc import ActionKind, ActionRegistry, Executor
from extend_kit.actions.output import ActionOutput, BufferedActionOutput
from extend_kit.actions.real import CommandExecutor, build_action_registry

__all__ = [
    "ActionKind",
    "ActionOutput",
    "ActionRegistry",
    "BufferedActionOutput",
    "CommandExecutor",
    "Executor",
    "build_action_registry",
]
