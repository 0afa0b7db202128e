"""Models for the `trace_*` namespace.

Field names use camelCase to match the node's JSON. Nested structures that
vary by trace kind (`action`, `result`, `vmTrace`, `stateDiff`) are kept as
plain dicts.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .primitives import U64, U256, BlockNumber, Bytes, H160, H256


class RpcModel(BaseModel):
    """Base model for wire structures."""

    model_config = ConfigDict(populate_by_name=True)


class TraceType(str, Enum):
    """Kinds of output a trace query can produce."""

    TRACE = "trace"
    VM_TRACE = "vmTrace"
    STATE_DIFF = "stateDiff"


class CallRequest(RpcModel):
    """Parameters of a message call that is traced but not executed on chain."""

    from_: H160 | None = Field(default=None, alias="from")
    to: H160 | None = None
    gas: U256 | None = None
    gasPrice: U256 | None = None
    value: U256 | None = None
    data: Bytes | None = None
    transactionType: U64 | None = Field(default=None, alias="type")
    accessList: list[dict[str, Any]] | None = None
    maxFeePerGas: U256 | None = None
    maxPriorityFeePerGas: U256 | None = None


class TraceFilter(RpcModel):
    """Filter for `trace_filter`. Unset fields are omitted from the request."""

    fromBlock: BlockNumber | None = None
    toBlock: BlockNumber | None = None
    fromAddress: list[H160] | None = None
    toAddress: list[H160] | None = None
    after: int | None = None
    count: int | None = None


class TransactionTrace(RpcModel):
    """One trace entry inside a BlockTrace."""

    traceAddress: list[int]
    subtraces: int
    action: dict[str, Any]
    type: str
    result: dict[str, Any] | None = None
    error: str | None = None


class BlockTrace(RpcModel):
    """Traces produced by replaying or simulating a single transaction."""

    output: Bytes
    trace: list[TransactionTrace] | None = None
    vmTrace: dict[str, Any] | None = None
    stateDiff: dict[str, Any] | None = None
    transactionHash: H256 | None = None


class Trace(RpcModel):
    """A trace located on chain (from trace_block, trace_filter, trace_get...)."""

    action: dict[str, Any]
    result: dict[str, Any] | None = None
    traceAddress: list[int]
    subtraces: int
    transactionPosition: int | None = None
    transactionHash: H256 | None = None
    blockNumber: int
    blockHash: H256
    type: str
    error: str | None = None
