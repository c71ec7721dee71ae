"""Fake executors and output capture for testing."""

from typing import Any

from extend_kit.actions.abc import ActionKind, Executor
from extend_kit.actions.output import ActionOutput


class FakeExecutor(Executor):
    """In-memory fake executor that returns a pre-configured value.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, result: Any = True, error: Exception | None = None) -> None:
        """Create FakeExecutor.

        Args:
            result: Value returned from execute()
            error: Exception raised from execute() instead of returning result
        """
        self._result = result
        self._error = error
        self._calls: list[tuple[Any, ...]] = []

    @property
    def calls(self) -> list[tuple[Any, ...]]:
        """Positional arguments of each execute() call. For test assertions only."""
        return self._calls

    def execute(self, *args: Any) -> Any:
        self._calls.append(args)
        if self._error is not None:
            raise self._error
        return self._result


def fake_action_registry(**results: Any) -> dict[ActionKind, FakeExecutor]:
    """Build a registry with a FakeExecutor for every action kind.

    Keyword arguments set the result of individual actions, e.g.
    fake_action_registry(show=[...]).
    """
    return {kind: FakeExecutor(result=results.get(kind.value, True)) for kind in ActionKind}


class FakeActionOutput(ActionOutput):
    """Returns fixed output and counts reads."""

    def __init__(self, *, output: str = "") -> None:
        self._output = output
        self._written: list[str] = []
        self._reads = 0

    @property
    def written(self) -> list[str]:
        return self._written

    @property
    def reads(self) -> int:
        return self._reads

    def write(self, text: str) -> None:
        self._written.append(text)

    def get_output(self) -> str:
        self._reads += 1
        return self._output
