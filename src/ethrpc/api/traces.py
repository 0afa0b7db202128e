"""`trace_*` namespace (OpenEthereum/Erigon style tracing)."""

from __future__ import annotations

from ..call import CallFuture
from ..types import (
    BlockId,
    BlockNumber,
    BlockTag,
    BlockTrace,
    Bytes,
    CallRequest,
    H256,
    Index,
    Trace,
    TraceFilter,
    TraceType,
)
from .base import Namespace


class Traces(Namespace):
    """Transaction and block tracing."""

    def call(
        self,
        request: CallRequest,
        trace_type: list[TraceType],
        block: BlockNumber | None = None,
    ) -> CallFuture[BlockTrace]:
        """Executes the given call and returns a number of possible traces for it."""
        block = BlockTag.LATEST if block is None else block
        return self._call("trace_call", [request, trace_type, block], BlockTrace)

    def call_many(
        self,
        requests: list[tuple[CallRequest, list[TraceType]]],
        block: BlockId | None = None,
    ) -> CallFuture[list[BlockTrace]]:
        """Performs multiple call traces on top of the same block.

        Allows tracing dependent transactions.
        """
        block = BlockTag.LATEST if block is None else block
        return self._call("trace_callMany", [requests, block], list[BlockTrace])

    def raw_transaction(self, data: bytes, trace_type: list[TraceType]) -> CallFuture[BlockTrace]:
        """Traces a call to `eth_sendRawTransaction` without making the call."""
        return self._call("trace_rawTransaction", [Bytes(data), trace_type], BlockTrace)

    def replay_transaction(
        self, tx_hash: H256, trace_type: list[TraceType]
    ) -> CallFuture[BlockTrace]:
        """Replays a transaction, returning the traces."""
        return self._call("trace_replayTransaction", [tx_hash, trace_type], BlockTrace)

    def replay_block_transactions(
        self, block: BlockNumber, trace_type: list[TraceType]
    ) -> CallFuture[list[BlockTrace]]:
        """Replays all transactions in a block returning the requested traces for each."""
        return self._call(
            "trace_replayBlockTransactions", [block, trace_type], list[BlockTrace]
        )

    def block(self, block: BlockNumber) -> CallFuture[list[Trace]]:
        """Returns traces created at given block."""
        return self._call("trace_block", [block], list[Trace])

    def filter(self, trace_filter: TraceFilter) -> CallFuture[list[Trace]]:
        """Returns traces matching the given filter."""
        return self._call("trace_filter", [trace_filter], list[Trace])

    def get(self, tx_hash: H256, index: list[Index]) -> CallFuture[Trace]:
        """Returns trace at the given position."""
        return self._call("trace_get", [tx_hash, index], Trace)

    def transaction(self, tx_hash: H256) -> CallFuture[list[Trace]]:
        """Returns all traces of a given transaction."""
        return self._call("trace_transaction", [tx_hash], list[Trace])
