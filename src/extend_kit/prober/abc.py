"""Abstract base class for registry connectivity probes."""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from extend_kit.prober.types import ProbeResult


class ConnectivityProber(ABC):
    """Abstract interface for checking that the extension registry is reachable."""

    @abstractmethod
    def probe(self, url: str, *, params: Mapping[str, str] | None = None) -> ProbeResult:
        """Issue a single reachability request to url.

        Args:
            url: Registry URL to request
            params: Query parameters sent with the request

        Returns:
            ProbeOk on success, otherwise the classified failure
        """
        ...
