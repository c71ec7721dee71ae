"""Capture of output produced by action executors."""

from abc import ABC, abstractmethod


class ActionOutput(ABC):
    """Collects text written by executors so callers can display it afterwards."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Append text to the captured output."""
        ...

    @abstractmethod
    def get_output(self) -> str:
        """Return everything captured so far."""
        ...


class BufferedActionOutput(ActionOutput):
    """Keeps captured output in memory."""

    def __init__(self) -> None:
        self._chunks: list[str] = []

    def write(self, text: str) -> None:
        if text:
            self._chunks.append(text)

    def get_output(self) -> str:
        return "".join(self._chunks)
