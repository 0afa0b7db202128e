"""Namespace bindings.

Thin callers of the core: each method renders its arguments, picks a fixed
method name and returns a CallFuture typed to the result.
"""

from .base import Namespace
from .net import Net
from .traces import Traces
from .web3 import Web3

__all__ = ["Namespace", "Net", "Traces", "Web3"]
