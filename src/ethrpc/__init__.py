"""ethrpc - Ethereum JSON-RPC client core.

Runs under asyncio or in hosts without a scheduler:

    # asyncio
    async with HttpTransport(TransportConfig(url=url)) as transport:
        version = await Web3(transport).client_version()

    # no event loop: blocking I/O plus single-poll resolution
    with BlockingHttpTransport(TransportConfig(url=url)) as transport:
        version = Web3(transport).client_version().resolve()
"""

from .api import Net, Traces, Web3
from .call import CallFuture, dispatch
from .codec import decode_response, decode_result, encode_request, render_param, render_params
from .config import TransportConfig
from .errors import (
    ContractViolation,
    DecodeError,
    NotReadyError,
    ResponseQueueEmptyError,
    RpcError,
    TransportError,
    UnserializableParamError,
    Web3Error,
)
from .resolve import Ready, ready, ready_error, resolve_ready
from .transports import (
    BaseTransport,
    BlockingHttpTransport,
    DecodingTransport,
    HttpTransport,
    TestTransport,
    Transport,
)

__all__ = [
    # Namespaces
    "Net",
    "Traces",
    "Web3",
    # Call adapter
    "CallFuture",
    "dispatch",
    # Codec
    "decode_response",
    "decode_result",
    "encode_request",
    "render_param",
    "render_params",
    # Config
    "TransportConfig",
    # Errors
    "ContractViolation",
    "DecodeError",
    "NotReadyError",
    "ResponseQueueEmptyError",
    "RpcError",
    "TransportError",
    "UnserializableParamError",
    "Web3Error",
    # Resolution bridge
    "Ready",
    "ready",
    "ready_error",
    "resolve_ready",
    # Transports
    "BaseTransport",
    "BlockingHttpTransport",
    "DecodingTransport",
    "HttpTransport",
    "TestTransport",
    "Transport",
]
