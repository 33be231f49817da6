"""HTTP adapter for the remote reason endpoint.

One ``GET <base_url><path>`` per call, answered by ``{"reason": "..."}``.
Transport and protocol faults are translated into the domain exceptions of
:mod:`howtosayno.domain.errors`; nothing is retried here.

Contents:
    * :class:`ReasonResponse` - Pydantic model of the response body.
    * :class:`HttpReasonFetcher` - httpx based :class:`~howtosayno.application.ports.ReasonFetcher`.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Final

import httpx
import orjson
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from howtosayno import __init__conf__
from howtosayno.adapters.config.settings import load_reason_api_settings
from howtosayno.domain.errors import (
    ClientError,
    FetchTimeoutError,
    ProtocolError,
    ServerError,
    UnreachableError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL: Final[str] = "https://naas.isalman.dev/"
DEFAULT_PATH: Final[str] = "no"
_SERVER_ERROR_FLOOR: Final[int] = 500


class ReasonResponse(BaseModel):
    """Body of a successful answer; unknown fields are ignored.

    Example:
        >>> ReasonResponse.model_validate({"reason": "No.", "id": 7}).reason
        'No.'
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    reason: str = Field(min_length=1)


def _join_url(base_url: str, path: str) -> str:
    """Join base URL and path with exactly one slash.

    Example:
        >>> _join_url("https://naas.isalman.dev", "/no")
        'https://naas.isalman.dev/no'
    """
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def _parse_reason(content: bytes) -> str:
    try:
        payload = orjson.loads(content)
    except orjson.JSONDecodeError as exc:
        raise ProtocolError(f"Response is not valid JSON: {exc}") from exc
    try:
        return ReasonResponse.model_validate(payload).reason
    except ValidationError as exc:
        raise ProtocolError(f"Response has no usable 'reason' field: {exc.error_count()} validation error(s)") from exc


class HttpReasonFetcher:
    """Fetch one reason per call over a pooled :class:`httpx.Client`.

    Args:
        base_url: Service root, e.g. ``https://naas.isalman.dev/``.
        path: Endpoint path below ``base_url``.
        connect_timeout: Seconds allowed to establish the connection.
        read_timeout: Seconds allowed between received bytes.
        write_timeout: Seconds allowed for sending the request.
        transport: Optional httpx transport, e.g. :class:`httpx.MockTransport` in tests.

    Example:
        >>> def handler(request: httpx.Request) -> httpx.Response:
        ...     return httpx.Response(200, json={"reason": "Not today."})
        >>> with HttpReasonFetcher(transport=httpx.MockTransport(handler)) as fetcher:
        ...     fetcher.fetch_reason()
        'Not today.'
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        path: str = DEFAULT_PATH,
        connect_timeout: float = 15.0,
        read_timeout: float = 30.0,
        write_timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = _join_url(base_url, path)
        self._client = httpx.Client(
            timeout=httpx.Timeout(connect=connect_timeout, read=read_timeout, write=write_timeout, pool=connect_timeout),
            headers={"Accept": "application/json", "User-Agent": f"{__init__conf__.name}/{__init__conf__.version}"},
            transport=transport,
        )

    @property
    def url(self) -> str:
        return self._url

    def fetch_reason(self) -> str:
        """Perform the request and return the reason text.

        Raises:
            FetchTimeoutError: A connect, read, write or pool deadline expired.
            UnreachableError: DNS, connection or other transport failure.
            ServerError: The remote answered with a 5xx status.
            ClientError: The remote answered with any other non-2xx status.
            ProtocolError: The body cannot be decoded or is not
                ``{"reason": "<non-empty text>"}``.
        """
        logger.debug("Requesting reason", extra={"url": self._url})
        try:
            response = self._client.get(self._url)
        except httpx.TimeoutException as exc:
            raise FetchTimeoutError(f"Request to {self._url} timed out: {exc}") from exc
        except httpx.TransportError as exc:
            raise UnreachableError(f"Could not reach {self._url}: {exc}") from exc
        except httpx.DecodingError as exc:
            raise ProtocolError(f"Response from {self._url} could not be decoded: {exc}") from exc

        status = response.status_code
        if status >= _SERVER_ERROR_FLOOR:
            raise ServerError(status)
        if not response.is_success:
            raise ClientError(status)
        return _parse_reason(response.content)

    def close(self) -> None:
        """Release pooled connections."""
        self._client.close()

    def __enter__(self) -> HttpReasonFetcher:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def create_reason_fetcher(config: Config) -> HttpReasonFetcher:
    """Build the HTTP fetcher described by the ``[reason_api]`` section.

    Raises:
        ConfigurationError: The section is invalid.
    """
    settings = load_reason_api_settings(config)
    return HttpReasonFetcher(
        settings.base_url,
        path=settings.path,
        connect_timeout=settings.connect_timeout,
        read_timeout=settings.read_timeout,
        write_timeout=settings.write_timeout,
    )


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_PATH", "HttpReasonFetcher", "ReasonResponse", "create_reason_fetcher"]
