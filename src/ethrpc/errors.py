"""Error taxonomy for JSON-RPC calls.

Two families:
- Web3Error: recoverable outcomes surfaced to the caller
  (TransportError, DecodeError, RpcError)
- ContractViolation: programming errors that abort the current call
  (unserializable parameter, unready future in the resolution bridge,
  empty canned-response queue)

ContractViolation is not a Web3Error; `except Web3Error` does not catch it.
"""

from __future__ import annotations

from typing import Any


class Web3Error(Exception):
    """Base class for recoverable call failures."""


class TransportError(Web3Error):
    """I/O boundary failure: connection refused, non-2xx status, bad URL.

    Raised before or independent of remote method execution.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"TransportError({self.message!r}, status_code={self.status_code!r})"


class DecodeError(Web3Error):
    """Response bytes are not a valid envelope, or the result has the wrong shape."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RpcError(Web3Error):
    """The node executed the call and reported an application-level error."""

    def __init__(
        self,
        code: int,
        message: str,
        data: Any | None = None,
    ) -> None:
        super().__init__(f"RPC error {code}: {message}")
        self.code = code
        self.message = message
        self.data = data

    def __repr__(self) -> str:
        return f"RpcError(code={self.code!r}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RpcError):
            return NotImplemented
        return (self.code, self.message, self.data) == (other.code, other.message, other.data)

    __hash__ = Exception.__hash__


class ContractViolation(RuntimeError):
    """A caller broke a documented precondition. Not meant to be handled."""


class UnserializableParamError(ContractViolation, TypeError):
    """A request parameter cannot be rendered to JSON."""


class NotReadyError(ContractViolation):
    """The resolution bridge polled an operation that was not yet complete."""


class ResponseQueueEmptyError(ContractViolation):
    """A test transport was asked for more responses than were scripted."""
