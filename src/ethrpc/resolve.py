"""Deterministic resolution of awaitables without an event loop.

For hosts that offer only a synchronous call-in/call-out boundary (for
example a deterministic sandbox whose I/O primitives block). Code written
against the async API can run there as long as every awaitable is already
complete when it is first polled.

Usage:
    transport = BlockingHttpTransport(TransportConfig(url=...))
    version = Net(transport).version().resolve()
"""

from __future__ import annotations

from collections.abc import Awaitable, Generator
from typing import Any, Generic, TypeVar

from .errors import NotReadyError

T = TypeVar("T")


class Ready(Generic[T]):
    """An awaitable that is complete from the moment it is built.

    Holds either a value or an exception. Can be awaited once.
    """

    __slots__ = ("_value", "_error", "_consumed")

    def __init__(self, value: T | None = None, error: BaseException | None = None) -> None:
        self._value = value
        self._error = error
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    def __await__(self) -> Generator[Any, None, T]:
        if self._consumed:
            raise RuntimeError("cannot reuse already awaited Ready")
        self._consumed = True
        if self._error is not None:
            raise self._error
        return self._value  # type: ignore[return-value]
        yield  # Make this a generator

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "error" if self._error else "value"
        return f"<Ready {state}>"


def ready(value: T) -> Ready[T]:
    """Wrap a value in a completed awaitable."""
    return Ready(value)


def ready_error(error: BaseException) -> Ready[Any]:
    """Wrap an exception in a completed awaitable."""
    return Ready(error=error)


def resolve_ready(awaitable: Awaitable[T]) -> T:
    """Poll `awaitable` exactly once and return its value.

    The awaitable must not suspend. If it does, it is closed and
    NotReadyError is raised; pairing this with a transport that really
    suspends is a usage error.

    Exceptions raised by the awaitable propagate unchanged.
    """
    iterator = awaitable.__await__()
    try:
        iterator.send(None)
    except StopIteration as done:
        return done.value

    close = getattr(iterator, "close", None)
    if close is not None:
        close()
    raise NotReadyError("Failed to resolve a ready future")
