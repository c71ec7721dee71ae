"""User-facing diagnostic messages with severity."""

from abc import ABC, abstractmethod
from enum import StrEnum


class Severity(StrEnum):
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


class DiagnosticSink(ABC):
    """Receives non-fatal, human-readable problems for display to the user.

    Emission is fire-and-forget; implementations must not raise.
    """

    @abstractmethod
    def emit(self, severity: Severity, message: str) -> None:
        """Record a message at the given severity."""
