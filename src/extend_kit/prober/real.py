"""Connectivity probe implemented with httpx."""

import logging
from collections.abc import Mapping

import httpx

from extend_kit.prober.abc import ConnectivityProber
from extend_kit.prober.types import (
    ClientError,
    OtherError,
    ProbeOk,
    ProbeResult,
    ServerError,
    TransportError,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = httpx.Timeout(30.0, connect=10.0)


class HttpxConnectivityProber(ConnectivityProber):
    """Production prober issuing one GET request through an httpx.Client.

    A client can be injected (tests pass one built on httpx.MockTransport);
    otherwise a short-lived client is created per probe.
    """

    def __init__(
        self,
        *,
        client: httpx.Client | None = None,
        timeout: httpx.Timeout = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = client
        self._timeout = timeout

    def probe(self, url: str, *, params: Mapping[str, str] | None = None) -> ProbeResult:
        logger.debug("Probing extension server %s", url)
        try:
            if self._client is not None:
                response = self._client.get(url, params=params, follow_redirects=True)
            else:
                with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
                    response = client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            if e.response.is_client_error:
                return ClientError(str(e))
            if e.response.is_server_error:
                return ServerError(str(e))
            return TransportError(str(e))
        except httpx.HTTPError as e:
            return TransportError(str(e))
        except Exception as e:
            # Not a request failure; still reported, never raised
            return OtherError(str(e))

        return ProbeOk(status_code=response.status_code)
