"""Diagnostic sink that writes styled messages to stderr."""

import logging

import click

from extend_kit.diagnostics.abc import DiagnosticSink, Severity

logger = logging.getLogger(__name__)

_STYLES = {
    Severity.DANGER: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: None,
    Severity.SUCCESS: "green",
}

_LOG_LEVELS = {
    Severity.DANGER: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.INFO: logging.INFO,
    Severity.SUCCESS: logging.INFO,
}


class ConsoleDiagnosticSink(DiagnosticSink):
    """Shows diagnostics on stderr and keeps them for later inspection."""

    def __init__(self) -> None:
        self._emitted: list[tuple[Severity, str]] = []

    @property
    def emitted(self) -> list[tuple[Severity, str]]:
        return list(self._emitted)

    def emit(self, severity: Severity, message: str) -> None:
        self._emitted.append((severity, message))
        logger.log(_LOG_LEVELS[severity], message)
        click.echo(click.style(message, fg=_STYLES[severity]), err=True)
