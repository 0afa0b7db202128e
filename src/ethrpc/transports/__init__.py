"""JSON-RPC transports.

- Transport / DecodingTransport: the abstract contract (two shapes)
- HttpTransport: asyncio, httpx.AsyncClient
- BlockingHttpTransport: blocking httpx.Client, pairs with resolve_ready
- TestTransport: canned responses and request assertions for tests
"""

from .base import BaseTransport, DecodingTransport, Transport
from .http import BlockingHttpTransport, HttpTransport
from .test import TestTransport

__all__ = [
    "BaseTransport",
    "BlockingHttpTransport",
    "DecodingTransport",
    "HttpTransport",
    "TestTransport",
    "Transport",
]
