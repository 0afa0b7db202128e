"""`net_*` namespace."""

from __future__ import annotations

from ..call import CallFuture
from ..types import U256
from .base import Namespace


class Net(Namespace):
    """Network status of the node."""

    def version(self) -> CallFuture[str]:
        """Returns the network id."""
        return self._call("net_version", [], str)

    def peer_count(self) -> CallFuture[U256]:
        """Returns number of peers connected to node."""
        return self._call("net_peerCount", [], U256)

    def is_listening(self) -> CallFuture[bool]:
        """Whether the node is listening for network connections."""
        return self._call("net_listening", [], bool)
