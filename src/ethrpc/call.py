"""Call adapter between transports and typed results.

Every namespace binding returns a CallFuture. It pairs a transport's
pending operation with the type the caller expects and decodes the raw
response once the operation completes.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Generator, Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .codec import decode_response
from .resolve import resolve_ready

if TYPE_CHECKING:
    from .transports.base import DecodingTransport, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CallFuture(Generic[T]):
    """Awaitable typed result of one JSON-RPC call.

    Args:
        pending: The transport's pending operation
        result_type: Type the result payload is validated as
        decoded: True if `pending` already yields a typed value
            (decoding transport), False if it yields raw response bytes

    A CallFuture is consumed by the first await/resolve. Dropping it before
    that stops the caller from seeing the result but does not retract I/O
    the transport has already dispatched. HttpTransport starts its POST on
    first await, so a dropped future there sends nothing and raises no
    "never awaited" warning.
    """

    def __init__(
        self,
        pending: Awaitable[Any],
        result_type: type[T],
        *,
        decoded: bool = False,
    ) -> None:
        self._pending = pending
        self.result_type = result_type
        self.decoded = decoded
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    def __await__(self) -> Generator[Any, None, T]:
        return self._complete().__await__()

    async def _complete(self) -> T:
        if self._consumed:
            raise RuntimeError("cannot reuse already awaited CallFuture")
        self._consumed = True

        output = await self._pending
        if self.decoded:
            return output
        return decode_response(output, self.result_type)

    def resolve(self) -> T:
        """Extract the result synchronously.

        Only valid when the transport completes I/O before returning its
        pending operation (e.g. BlockingHttpTransport, TestTransport).

        Raises:
            NotReadyError: If the pending operation would suspend
        """
        return resolve_ready(self)

    def __repr__(self) -> str:
        name = getattr(self.result_type, "__name__", repr(self.result_type))
        return f"<CallFuture[{name}] consumed={self._consumed}>"


def dispatch(
    transport: Transport | DecodingTransport,
    method: str,
    params: Sequence[Any],
    result_type: type[T],
) -> CallFuture[T]:
    """Execute `method` on `transport` and wrap the pending operation.

    Works with either transport shape: raw transports get their bytes
    decoded by the CallFuture, decoding transports receive `result_type`
    and decode on their own.
    """
    decodes = getattr(transport, "decodes_results", False)
    logger.debug(f"Dispatching {method} with {len(params)} params")
    if decodes:
        pending = transport.execute(method, params, result_type)  # type: ignore[call-arg]
    else:
        pending = transport.execute(method, params)  # type: ignore[call-arg]
    return CallFuture(pending, result_type, decoded=decodes)
