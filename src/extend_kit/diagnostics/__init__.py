from extend_kit.diagnostics.abc import DiagnosticSink, Severity
from extend_kit.diagnostics.real import ConsoleDiagnosticSink

__all__ = [
    "ConsoleDiagnosticSink",
    "DiagnosticSink",
    "Severity",
]
