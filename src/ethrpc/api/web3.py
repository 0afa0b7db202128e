"""`web3_*` namespace and entry point to the other namespaces."""

from __future__ import annotations

from ..call import CallFuture
from ..types import Bytes, H256
from .base import Namespace
from .net import Net
from .traces import Traces


class Web3(Namespace):
    """Client entry point.

    Usage:
        web3 = Web3(HttpTransport(TransportConfig(url="http://localhost:8545")))
        print(await web3.client_version())
        print(await web3.net().version())
    """

    def net(self) -> Net:
        """`net_*` methods on the same transport."""
        return Net(self._transport)

    def traces(self) -> Traces:
        """`trace_*` methods on the same transport."""
        return Traces(self._transport)

    def client_version(self) -> CallFuture[str]:
        """Returns client version."""
        return self._call("web3_clientVersion", [], str)

    def sha3(self, data: bytes) -> CallFuture[H256]:
        """Returns Keccak-256 of the given data, computed by the node."""
        return self._call("web3_sha3", [Bytes(data)], H256)
