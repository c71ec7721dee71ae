"""Result types for connectivity probes.

A probe never raises for request failures; it returns one of these variants
so callers can match on the kind of failure without knowing the HTTP
client's exception hierarchy.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProbeOk:
    status_code: int


@dataclass(frozen=True)
class ClientError:
    """The registry answered with a 4xx response."""

    message: str


@dataclass(frozen=True)
class ServerError:
    """The registry answered with a 5xx response."""

    message: str


@dataclass(frozen=True)
class TransportError:
    """The request failed without a response (DNS, connection, timeout)."""

    message: str


@dataclass(frozen=True)
class OtherError:
    """Any failure not recognized as a request failure."""

    message: str


ProbeFailure = ClientError | ServerError | TransportError | OtherError
ProbeResult = ProbeOk | ProbeFailure
