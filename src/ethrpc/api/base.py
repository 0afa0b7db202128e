"""Shared base for namespace bindings."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from ..call import CallFuture, dispatch
from ..transports.base import DecodingTransport, Transport

T = TypeVar("T")


class Namespace:
    """A group of RPC methods bound to one transport."""

    def __init__(self, transport: Transport | DecodingTransport) -> None:
        self._transport = transport

    @property
    def transport(self) -> Transport | DecodingTransport:
        return self._transport

    def _call(self, method: str, params: Sequence[Any], result_type: type[T]) -> CallFuture[T]:
        return dispatch(self._transport, method, params, result_type)
