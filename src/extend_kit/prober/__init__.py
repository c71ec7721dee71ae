from extend_kit.prober.abc import ConnectivityProber
from extend_kit.prober.real import HttpxConnectivityProber
from extend_kit.prober.types import (
    ClientError,
    OtherError,
    ProbeFailure,
    ProbeOk,
    ProbeResult,
    ServerError,
    TransportError,
)

__all__ = [
    "ClientError",
    "ConnectivityProber",
    "HttpxConnectivityProber",
    "OtherError",
    "ProbeFailure",
    "ProbeOk",
    "ProbeResult",
    "ServerError",
    "TransportError",
]
