"""HttpReasonFetcher: request shape and error translation (httpx.MockTransport)."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest
from lib_layered_config import Config

from howtosayno.adapters.http import HttpReasonFetcher, create_reason_fetcher
from howtosayno.domain.errors import (
    ClientError,
    ConfigurationError,
    FetchTimeoutError,
    ProtocolError,
    ServerError,
    UnreachableError,
)

Handler = Callable[[httpx.Request], httpx.Response]


def _fetcher(handler: Handler, **kwargs: object) -> HttpReasonFetcher:
    return HttpReasonFetcher(transport=httpx.MockTransport(handler), **kwargs)  # type: ignore[arg-type]


def _respond(status: int, content: bytes) -> Handler:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, content=content)

    return _handler


def _raise(exc_type: type[httpx.TransportError]) -> Handler:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise exc_type("simulated", request=request)

    return _handler


@pytest.mark.os_agnostic
def test_fetch_returns_reason_text() -> None:
    with _fetcher(_respond(200, b'{"reason": "Not today."}')) as fetcher:
        assert fetcher.fetch_reason() == "Not today."


@pytest.mark.os_agnostic
def test_fetch_issues_get_to_endpoint() -> None:
    seen: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"reason": "No."})

    with _fetcher(_handler) as fetcher:
        fetcher.fetch_reason()

    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert str(seen[0].url) == "https://naas.isalman.dev/no"
    assert seen[0].headers["Accept"] == "application/json"


@pytest.mark.os_agnostic
def test_base_url_and_path_are_joined_with_one_slash() -> None:
    fetcher = HttpReasonFetcher("https://example.test/api", path="/no")

    assert fetcher.url == "https://example.test/api/no"
    fetcher.close()


@pytest.mark.os_agnostic
def test_unknown_fields_are_ignored() -> None:
    with _fetcher(_respond(200, b'{"reason": "No.", "id": 1, "lang": "en"}')) as fetcher:
        assert fetcher.fetch_reason() == "No."


@pytest.mark.os_agnostic
@pytest.mark.parametrize("exc_type", [httpx.ConnectTimeout, httpx.ReadTimeout, httpx.WriteTimeout, httpx.PoolTimeout])
def test_timeouts_become_fetch_timeout(exc_type: type[httpx.TransportError]) -> None:
    with _fetcher(_raise(exc_type)) as fetcher, pytest.raises(FetchTimeoutError):
        fetcher.fetch_reason()


@pytest.mark.os_agnostic
@pytest.mark.parametrize("exc_type", [httpx.ConnectError, httpx.ReadError, httpx.RemoteProtocolError])
def test_transport_failures_become_unreachable(exc_type: type[httpx.TransportError]) -> None:
    with _fetcher(_raise(exc_type)) as fetcher, pytest.raises(UnreachableError):
        fetcher.fetch_reason()


@pytest.mark.os_agnostic
@pytest.mark.parametrize("status", [500, 502, 503, 599])
def test_5xx_becomes_server_error(status: int) -> None:
    with _fetcher(_respond(status, b"")) as fetcher, pytest.raises(ServerError) as exc_info:
        fetcher.fetch_reason()

    assert exc_info.value.status_code == status


@pytest.mark.os_agnostic
@pytest.mark.parametrize("status", [301, 400, 404, 429])
def test_other_non_2xx_becomes_client_error(status: int) -> None:
    with _fetcher(_respond(status, b"")) as fetcher, pytest.raises(ClientError) as exc_info:
        fetcher.fetch_reason()

    assert exc_info.value.status_code == status
    assert str(exc_info.value) == f"Request failed with error code: {status}"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "body",
    [b"not json", b"[]", b"{}", b'{"reason": ""}', b'{"reason": 42}', b'{"message": "No."}'],
)
def test_malformed_body_becomes_protocol_error(body: bytes) -> None:
    with _fetcher(_respond(200, body)) as fetcher, pytest.raises(ProtocolError):
        fetcher.fetch_reason()


@pytest.mark.os_agnostic
def test_undecodable_body_becomes_protocol_error() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"not gzip at all")

    with _fetcher(_handler) as fetcher, pytest.raises(ProtocolError, match="could not be decoded"):
        fetcher.fetch_reason()


@pytest.mark.os_agnostic
def test_every_call_is_a_single_attempt() -> None:
    calls: list[int] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        calls.append(1)
        return httpx.Response(503)

    with _fetcher(_handler) as fetcher, pytest.raises(ServerError):
        fetcher.fetch_reason()

    assert len(calls) == 1


@pytest.mark.os_agnostic
def test_create_reason_fetcher_reads_reason_api_section() -> None:
    config = Config({"reason_api": {"base_url": "http://localhost:8080/", "path": "v1/no"}}, {})

    fetcher = create_reason_fetcher(config)

    assert fetcher.url == "http://localhost:8080/v1/no"
    fetcher.close()


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "section",
    [{"connect_timeout": 0}, {"read_timeout": -1}, {"base_url": "ftp://example.test"}],
)
def test_create_reason_fetcher_rejects_invalid_settings(section: dict[str, object]) -> None:
    with pytest.raises(ConfigurationError, match=r"\[reason_api\]"):
        create_reason_fetcher(Config({"reason_api": section}, {}))
