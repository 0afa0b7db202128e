"""HTTP transports.

- HttpTransport: httpx.AsyncClient, for asyncio hosts
- BlockingHttpTransport: httpx.Client, finishes the round trip inside
  `execute()` and returns an already completed operation, so results can be
  extracted with `CallFuture.resolve()` in hosts without an event loop
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Generator, Sequence
from typing import Any

import httpx

from ..codec import encode_request
from ..config import TransportConfig
from ..errors import TransportError
from ..resolve import Ready
from .base import BaseTransport

logger = logging.getLogger(__name__)


def _headers(config: TransportConfig) -> dict[str, str]:
    return {"Content-Type": "application/json", **config.headers}


def _check_status(response: httpx.Response, method: str) -> bytes:
    """Return the body of a 2xx response, raise TransportError otherwise."""
    if response.status_code // 100 != 2:
        logger.warning(f"{method}: node returned HTTP {response.status_code}")
        raise TransportError(
            f"Unexpected HTTP status {response.status_code}",
            status_code=response.status_code,
        )
    return response.content


def _transport_error(error: Exception, method: str) -> TransportError:
    if isinstance(error, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return TransportError(f"failed to parse url: {error}")
    logger.warning(f"{method}: request failed: {error}")
    return TransportError(f"{method} request failed: {error}")


class _PendingPost:
    """An encoded request whose POST starts on first await.

    Dropping it unawaited sends nothing and leaves no coroutine behind.
    """

    __slots__ = ("_transport", "_method", "_body")

    def __init__(self, transport: HttpTransport, method: str, body: str) -> None:
        self._transport = transport
        self._method = method
        self._body = body

    def __await__(self) -> Generator[Any, None, bytes]:
        return self._transport._post(self._method, self._body).__await__()


class HttpTransport(BaseTransport):
    """JSON-RPC over HTTP POST for asyncio hosts.

    Clones share the underlying httpx.AsyncClient; closing one closes it for all.

    Usage:
        async with HttpTransport(TransportConfig(url="http://localhost:8545")) as transport:
            version = await Net(transport).version()
    """

    def __init__(
        self,
        config: TransportConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ):
        super().__init__(config)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self.config.timeout)

    def execute(self, method: str, params: Sequence[Any]) -> Awaitable[bytes]:
        """Encode the request now and return the pending POST.

        The awaitable yields the raw response body, or raises TransportError
        on connection failure, bad URL or non-2xx status.

        Raises:
            UnserializableParamError: If a parameter cannot be rendered
        """
        body = encode_request(method, params, version=self.config.jsonrpc_version)
        return _PendingPost(self, method, body)

    async def _post(self, method: str, body: str) -> bytes:
        logger.debug(f"POST {self.config.url} {body}")
        try:
            response = await self._client.post(
                self.config.url,
                content=body,
                headers=_headers(self.config),
            )
        except (httpx.InvalidURL, httpx.RequestError) as e:
            raise _transport_error(e, method) from e
        return _check_status(response, method)

    async def aclose(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpTransport:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()


class BlockingHttpTransport(BaseTransport):
    """JSON-RPC over HTTP POST using blocking I/O.

    The request completes before `execute()` returns, so every pending
    operation is ready on first poll.

    Usage:
        with BlockingHttpTransport(TransportConfig(url="http://localhost:8545")) as transport:
            version = Net(transport).version().resolve()
    """

    def __init__(
        self,
        config: TransportConfig | None = None,
        *,
        client: httpx.Client | None = None,
    ):
        super().__init__(config)
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self.config.timeout)

    def execute(self, method: str, params: Sequence[Any]) -> Ready[bytes]:
        """POST the request now and return the completed operation.

        Raises:
            UnserializableParamError: If a parameter cannot be rendered
        """
        body = encode_request(method, params, version=self.config.jsonrpc_version)
        logger.debug(f"POST {self.config.url} {body}")
        try:
            response = self._client.post(
                self.config.url,
                content=body,
                headers=_headers(self.config),
            )
            return Ready(_check_status(response, method))
        except TransportError as e:
            return Ready(error=e)
        except (httpx.InvalidURL, httpx.RequestError) as e:
            return Ready(error=_transport_error(e, method))

    def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> BlockingHttpTransport:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
