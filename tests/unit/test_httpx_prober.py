"""Tests for HttpxConnectivityProber using httpx.MockTransport."""

from collections.abc import Callable

import httpx

from extend_kit.context import ExtendContext, fake_settings
from extend_kit.package_manager import PackageManager
from extend_kit.prober.real import HttpxConnectivityProber
from extend_kit.prober.types import ClientError, OtherError, ProbeOk, ServerError, TransportError


def prober_for(handler: Callable[[httpx.Request], httpx.Response]) -> HttpxConnectivityProber:
    return HttpxConnectivityProber(client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_probe_success_returns_ok() -> None:
    prober = prober_for(lambda request: httpx.Response(200))

    assert prober.probe("https://example.com") == ProbeOk(status_code=200)


def test_probe_sends_query_params() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200)

    prober_for(handler).probe("https://example.com/", params={"platform_ver": "4.0.0"})

    assert seen[0].method == "GET"
    assert seen[0].url.params["platform_ver"] == "4.0.0"


def test_probe_4xx_is_client_error() -> None:
    result = prober_for(lambda request: httpx.Response(400)).probe("https://example.com")

    assert isinstance(result, ClientError)
    assert "400" in result.message


def test_probe_5xx_is_server_error() -> None:
    result = prober_for(lambda request: httpx.Response(503)).probe("https://example.com")

    assert isinstance(result, ServerError)
    assert "503" in result.message


def test_probe_follows_redirects_on_injected_client() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/moved":
            return httpx.Response(200)
        return httpx.Response(301, headers={"Location": "https://example.com/moved"})

    result = prober_for(handler).probe("https://example.com/")

    assert result == ProbeOk(status_code=200)


def test_probe_connection_failure_is_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("DNS down", request=request)

    result = prober_for(handler).probe("https://example.com")

    assert result == TransportError("DNS down")


def test_probe_timeout_is_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    assert prober_for(handler).probe("https://example.com") == TransportError("timed out")


def test_probe_unrecognized_failure_is_other_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise RuntimeError("Drop bear")

    assert prober_for(handler).probe("https://example.com") == OtherError("Drop bear")


def test_package_manager_reports_http_client_error() -> None:
    ctx = ExtendContext.for_test(
        settings=fake_settings(writeable=True, site="https://example.com"),
        prober=prober_for(lambda request: httpx.Response(404)),
    )

    messages = PackageManager(ctx).get_messages()

    assert len(messages) == 1
    assert messages[0].startswith("Client error: ")
    assert "404" in messages[0]


def test_package_manager_reports_dns_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("DNS down", request=request)

    ctx = ExtendContext.for_test(
        settings=fake_settings(writeable=True, site="https://example.com"),
        prober=prober_for(handler),
    )

    assert PackageManager(ctx).get_messages() == [
        "Testing connection to extension server failed: DNS down"
    ]
