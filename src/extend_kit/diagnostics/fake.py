"""Fake diagnostic sink for testing."""

from extend_kit.diagnostics.abc import DiagnosticSink, Severity


class FakeDiagnosticSink(DiagnosticSink):
    """Records emitted diagnostics without displaying them."""

    def __init__(self) -> None:
        self._emitted: list[tuple[Severity, str]] = []

    @property
    def emitted(self) -> list[tuple[Severity, str]]:
        """(severity, message) of each emit() call. For test assertions only."""
        return self._emitted

    def emit(self, severity: Severity, message: str) -> None:
        self._emitted.append((severity, message))
