"""Transport contract.

A transport turns a method name and an ordered parameter list into a
pending operation. Two shapes exist; a deployment commits to one:

- Transport: the operation yields raw response bytes and the CallFuture
  decodes them
- DecodingTransport: the operation receives the expected result type and
  yields an already-typed value

Failures at the I/O boundary (connection refused, non-2xx status, bad URL)
complete the operation with TransportError, never RpcError.

The contract says nothing about thread safety. Handles meant to be shared by
several callers are duplicated with `clone()`; every clone routes to the
same underlying channel.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Sequence
from typing import Any, ClassVar, Protocol, TypeVar, runtime_checkable

from ..call import CallFuture, dispatch
from ..config import TransportConfig

T = TypeVar("T")
TransportT = TypeVar("TransportT", bound="BaseTransport")


@runtime_checkable
class Transport(Protocol):
    """Transport whose pending operation yields raw response bytes."""

    def execute(self, method: str, params: Sequence[Any]) -> Awaitable[bytes]:
        """Send `method(*params)` to the node.

        Args:
            method: Remote method name
            params: Parameters in the order the remote method expects

        Returns:
            Awaitable yielding the raw response body

        Raises:
            UnserializableParamError: If a parameter cannot be rendered
        """
        ...


class DecodingTransport(Protocol):
    """Transport that decodes the result into the caller's type itself.

    Not runtime-checkable: both shapes expose `execute`, so the shape is
    read from the `decodes_results` class attribute instead.
    """

    decodes_results: ClassVar[bool]

    def execute(
        self, method: str, params: Sequence[Any], result_type: type[T]
    ) -> Awaitable[T]:
        """Send `method(*params)` and yield the result as `result_type`."""
        ...


class BaseTransport(ABC):
    """Base class for transports with common functionality.

    Provides:
    - Configuration
    - `call()` returning a typed CallFuture
    - Cheap duplication via `clone()`
    """

    decodes_results: ClassVar[bool] = False

    def __init__(self, config: TransportConfig | None = None):
        self.config = config or TransportConfig()

    @abstractmethod
    def execute(self, method: str, params: Sequence[Any], *args: Any) -> Awaitable[Any]:
        """Implementation-specific dispatch."""
        ...

    def call(self, method: str, params: Sequence[Any], result_type: type[T]) -> CallFuture[T]:
        """Execute `method` and return a CallFuture typed as `result_type`."""
        return dispatch(self, method, params, result_type)

    def clone(self: TransportT) -> TransportT:
        """Return a new handle sharing this transport's channel."""
        return copy.copy(self)
