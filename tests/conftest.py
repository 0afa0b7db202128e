"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route

from ethrpc import TestTransport

SHA3_OF_01020304 = "0x0000000000000000000000000000000000000000000000000000000000000123"


class FakeNode:
    """In-process JSON-RPC node served as a Starlette app.

    Routes:
    - POST /         JSON-RPC endpoint with a few canned methods
    - POST /broken   always HTTP 502
    - POST /garbage  HTTP 200 with a non-JSON body
    """

    def __init__(self) -> None:
        self.received: list[dict[str, Any]] = []
        self.content_types: list[str] = []
        self.results: dict[str, Any] = {
            "net_version": "1",
            "net_listening": True,
            "net_peerCount": "0x19",
            "web3_clientVersion": "FakeNode/v1.0",
            "web3_sha3": SHA3_OF_01020304,
        }
        self.app = Starlette(
            routes=[
                Route("/", self.rpc, methods=["POST"]),
                Route("/broken", self.broken, methods=["POST"]),
                Route("/garbage", self.garbage, methods=["POST"]),
            ]
        )

    async def rpc(self, request: Request) -> JSONResponse:
        payload = await request.json()
        self.received.append(payload)
        self.content_types.append(request.headers.get("content-type", ""))

        method = payload.get("method")
        if method == "eth_fail":
            return JSONResponse(
                {"jsonrpc": "2.0", "id": payload["id"], "error": {"code": -32000, "message": "boom"}}
            )
        if method not in self.results:
            return JSONResponse(
                {
                    "jsonrpc": "2.0",
                    "id": payload["id"],
                    "error": {"code": -32601, "message": "Method not found"},
                }
            )
        return JSONResponse({"jsonrpc": "2.0", "id": payload["id"], "result": self.results[method]})

    async def broken(self, request: Request) -> PlainTextResponse:
        return PlainTextResponse("bad gateway", status_code=502)

    async def garbage(self, request: Request) -> PlainTextResponse:
        return PlainTextResponse("<html>not json</html>")


@pytest.fixture
def transport() -> TestTransport:
    """Fresh scriptable transport."""
    return TestTransport()


@pytest.fixture
def node() -> FakeNode:
    """Fresh fake JSON-RPC node."""
    return FakeNode()
