"""Fake connectivity prober for testing."""

from collections.abc import Mapping

from extend_kit.prober.abc import ConnectivityProber
from extend_kit.prober.types import ProbeOk, ProbeResult


class FakeConnectivityProber(ConnectivityProber):
    """In-memory fake that returns a pre-configured probe result.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        result: ProbeResult | None = None,
        error: Exception | None = None,
    ) -> None:
        """Create FakeConnectivityProber.

        Args:
            result: Result returned from probe() (defaults to ProbeOk(200))
            error: Exception raised from probe() instead of returning a result
        """
        self._result = result if result is not None else ProbeOk(status_code=200)
        self._error = error
        self._probed: list[tuple[str, dict[str, str]]] = []

    @property
    def probed(self) -> list[tuple[str, dict[str, str]]]:
        """(url, params) of each probe() call. For test assertions only."""
        return self._probed

    def probe(self, url: str, *, params: Mapping[str, str] | None = None) -> ProbeResult:
        self._probed.append((url, dict(params or {})))
        if self._error is not None:
            raise self._error
        return self._result
