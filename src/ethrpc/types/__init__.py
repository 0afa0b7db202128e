"""Wire types for Ethereum JSON-RPC parameters and results."""

from .primitives import (
    U64,
    U256,
    Address,
    BlockId,
    BlockNumber,
    BlockTag,
    Bytes,
    H160,
    H256,
    Index,
    Quantity,
)
from .traces import (
    BlockTrace,
    CallRequest,
    RpcModel,
    Trace,
    TraceFilter,
    TraceType,
    TransactionTrace,
)

__all__ = [
    "Address",
    "BlockId",
    "BlockNumber",
    "BlockTag",
    "BlockTrace",
    "Bytes",
    "CallRequest",
    "H160",
    "H256",
    "Index",
    "Quantity",
    "RpcModel",
    "Trace",
    "TraceFilter",
    "TraceType",
    "TransactionTrace",
    "U64",
    "U256",
]
