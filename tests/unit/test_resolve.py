"""Unit tests for deterministic resolution without an event loop."""

from __future__ import annotations

import asyncio

import pytest

from ethrpc.errors import ContractViolation, NotReadyError, TransportError
from ethrpc.resolve import Ready, ready, ready_error, resolve_ready


class TestReady:
    """Test the completed awaitable."""

    def test_resolves_to_value(self):
        """A ready value resolves on the first poll."""
        assert resolve_ready(ready(42)) == 42

    def test_raises_stored_error(self):
        """A ready error is raised on the first poll."""
        error = TransportError("connection refused")

        with pytest.raises(TransportError) as exc_info:
            resolve_ready(ready_error(error))

        assert exc_info.value is error

    def test_single_use(self):
        """A Ready cannot be awaited twice."""
        value = ready("x")
        resolve_ready(value)

        assert value.consumed
        with pytest.raises(RuntimeError, match="reuse"):
            resolve_ready(value)

    @pytest.mark.asyncio
    async def test_awaitable_under_asyncio(self):
        """The same object works inside a running loop."""
        assert await Ready(b"body") == b"body"

    def test_repr(self):
        """repr reports the state."""
        value = ready(1)
        assert repr(value) == "<Ready value>"
        resolve_ready(value)
        assert repr(value) == "<Ready consumed>"


class TestResolveReady:
    """Test single-poll resolution."""

    def test_coroutine_awaiting_only_ready_values(self):
        """Coroutines composed of ready awaitables complete in one poll."""

        async def compose() -> int:
            a = await ready(1)
            b = await ready(2)
            return a + b

        assert resolve_ready(compose()) == 3

    def test_suspending_coroutine_is_not_ready(self):
        """A coroutine that yields to a scheduler is a contract violation."""

        async def suspends() -> int:
            await asyncio.sleep(0)
            return 1

        with pytest.raises(NotReadyError):
            resolve_ready(suspends())

    def test_not_ready_is_fatal_not_recoverable(self):
        """NotReadyError belongs to the contract violation family."""
        assert issubclass(NotReadyError, ContractViolation)
        assert issubclass(NotReadyError, RuntimeError)

    def test_suspended_coroutine_is_closed(self):
        """The polled operation is closed after a failed resolution."""
        finished = []

        async def suspends() -> None:
            try:
                await asyncio.sleep(0)
            finally:
                finished.append(True)

        with pytest.raises(NotReadyError):
            resolve_ready(suspends())

        assert finished == [True]

    def test_pending_future_is_not_ready(self):
        """An unfinished asyncio future cannot be resolved."""
        loop = asyncio.new_event_loop()
        try:
            future = loop.create_future()
            with pytest.raises(NotReadyError):
                resolve_ready(future)
        finally:
            loop.close()

    def test_done_future_resolves(self):
        """A finished asyncio future resolves to its result."""
        loop = asyncio.new_event_loop()
        try:
            future = loop.create_future()
            future.set_result("done")
            assert resolve_ready(future) == "done"
        finally:
            loop.close()

    def test_exception_propagates(self):
        """Errors raised by the operation propagate unchanged."""

        async def fails() -> None:
            raise TransportError("bad url")

        with pytest.raises(TransportError, match="bad url"):
            resolve_ready(fails())
