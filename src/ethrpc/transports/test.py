"""Scriptable transport for tests.

Replays canned responses in FIFO order and records every request so a test
can assert exactly what was sent.

Usage:
    transport = TestTransport()
    transport.set_response("Test123")

    version = await Net(transport).version()

    transport.assert_request("net_version", [])
    transport.assert_no_more_requests()
    assert version == "Test123"

Copies made with `clone()` (or `copy.copy`) share one history. The fixture
is single-threaded.
"""

from __future__ import annotations

import json
import logging
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..codec import (
    REQUEST_ID,
    JsonRpcErrorObject,
    JsonRpcResponse,
    encode_request,
    render_param,
    render_params,
)
from ..config import JSONRPC_VERSION, TransportConfig
from ..errors import ResponseQueueEmptyError
from ..resolve import Ready
from .base import BaseTransport

logger = logging.getLogger(__name__)


@dataclass
class _Fixture:
    """Shared request/response history."""

    responses: deque[bytes] = field(default_factory=deque)
    requests: list[tuple[str, str]] = field(default_factory=list)
    asserted: int = 0


def _success_body(value: Any) -> bytes:
    response = JsonRpcResponse(jsonrpc=JSONRPC_VERSION, id=REQUEST_ID, result=render_param(value))
    return response.model_dump_json(exclude={"error"}).encode("utf-8")


def _error_body(code: int, message: str, data: Any | None) -> bytes:
    response = JsonRpcResponse(
        jsonrpc=JSONRPC_VERSION,
        id=REQUEST_ID,
        error=JsonRpcErrorObject(code=code, message=message, data=data),
    )
    return response.model_dump_json(exclude={"result"}, exclude_none=True).encode("utf-8")


def _raw_body(body: bytes | str) -> bytes:
    return body.encode("utf-8") if isinstance(body, str) else bytes(body)


def _canonical(value: Any) -> str:
    # JSON text keeps true/1/1.0 apart, unlike Python equality
    return json.dumps(value, sort_keys=True, separators=(",", ":"))


class TestTransport(BaseTransport):
    """Transport double driven by a queue of canned responses.

    Args:
        version: "jsonrpc" tag rendered into recorded requests (omitted by
            default so recorded requests read as {"id":0,"method":...,"params":...})
    """

    __test__ = False  # not a pytest test class

    def __init__(self, *, version: str | None = None) -> None:
        super().__init__(TransportConfig(url="test://", jsonrpc_version=version))
        self._fixture = _Fixture()

    # Scripting responses

    def set_response(self, value: Any) -> None:
        """Discard queued responses and queue one result."""
        self._fixture.responses = deque([_success_body(value)])

    def add_response(self, value: Any) -> None:
        """Queue one more result."""
        self._fixture.responses.append(_success_body(value))

    def set_error(self, code: int, message: str, data: Any | None = None) -> None:
        """Discard queued responses and queue one error."""
        self._fixture.responses = deque([_error_body(code, message, data)])

    def add_error(self, code: int, message: str, data: Any | None = None) -> None:
        """Queue one more error."""
        self._fixture.responses.append(_error_body(code, message, data))

    def set_raw_response(self, body: bytes | str) -> None:
        """Discard queued responses and queue one verbatim response body."""
        self._fixture.responses = deque([_raw_body(body)])

    def add_raw_response(self, body: bytes | str) -> None:
        """Queue one more verbatim response body."""
        self._fixture.responses.append(_raw_body(body))

    @property
    def pending_responses(self) -> int:
        """Number of canned responses not yet consumed."""
        return len(self._fixture.responses)

    @property
    def requests(self) -> list[tuple[str, str]]:
        """All recorded (method, rendered request) pairs."""
        return list(self._fixture.requests)

    # Transport

    def execute(self, method: str, params: Sequence[Any]) -> Ready[bytes]:
        """Record the request and return the next canned response.

        Raises:
            ResponseQueueEmptyError: If no canned response is left
        """
        fixture = self._fixture
        request = encode_request(method, params, version=self.config.jsonrpc_version)
        fixture.requests.append((method, request))
        logger.debug(f"Recorded request #{len(fixture.requests) - 1}: {request}")

        if not fixture.responses:
            raise ResponseQueueEmptyError(
                f"No canned response left for {method}; "
                "script one with set_response()/add_response()"
            )
        return Ready(fixture.responses.popleft())

    # Assertions

    def assert_request(self, method: str, params: Sequence[Any] | str = ()) -> None:
        """Check the next unchecked request and advance the cursor.

        Comparison is structural and type-exact (true is not 1, 1 is not
        1.0): `params` may be a JSON string, a list of JSON values, or a list
        of typed parameters rendered the same way the transport renders them.

        Raises:
            AssertionError: If no request is left or it does not match
        """
        fixture = self._fixture
        idx = fixture.asserted
        if idx >= len(fixture.requests):
            raise AssertionError(
                f"Expected request #{idx} ({method}), but only "
                f"{len(fixture.requests)} request(s) were issued"
            )
        fixture.asserted += 1

        actual_method, rendered = fixture.requests[idx]
        expected_params = json.loads(params) if isinstance(params, str) else render_params(params)
        expected: dict[str, Any] = {"id": REQUEST_ID, "method": method, "params": expected_params}
        if self.config.jsonrpc_version is not None:
            expected["jsonrpc"] = self.config.jsonrpc_version
        actual = json.loads(rendered)

        if actual_method != method or _canonical(actual) != _canonical(expected):
            raise AssertionError(
                f"Request #{idx} mismatch:\n  actual:   {rendered}\n  expected: {json.dumps(expected)}"
            )

    def assert_no_more_requests(self) -> None:
        """Fail if any recorded request has not been checked.

        Raises:
            AssertionError: Listing the unchecked requests
        """
        fixture = self._fixture
        if fixture.asserted != len(fixture.requests):
            raise AssertionError(
                f"Expected no more requests, got: {fixture.requests[fixture.asserted:]}"
            )
