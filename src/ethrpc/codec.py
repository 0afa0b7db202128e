"""JSON-RPC envelope codec.

Request wire format (the "jsonrpc" tag is optional):
    {"jsonrpc": "2.0", "id": 0, "method": "net_version", "params": []}

Response wire format, exactly one of result/error:
    {"id": 0, "result": "1"}
    {"id": 0, "error": {"code": -32000, "message": "boom"}}

The id is always 0: one handle tracks at most one outstanding call.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from enum import Enum
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from .config import JSONRPC_VERSION
from .errors import DecodeError, RpcError, UnserializableParamError

logger = logging.getLogger(__name__)

T = TypeVar("T")

REQUEST_ID = 0


class JsonRpcRequest(BaseModel):
    """JSON-RPC request envelope."""

    jsonrpc: str | None = None
    id: int = REQUEST_ID
    method: str
    params: list[Any]


class JsonRpcErrorObject(BaseModel):
    """JSON-RPC error object."""

    code: int
    message: str
    data: Any | None = None


class JsonRpcResponse(BaseModel):
    """JSON-RPC response envelope.

    `result` is kept untyped here; it is validated against the caller's
    expected type in a second step.
    """

    jsonrpc: str | None = None
    id: int | str | None = None
    result: Any = None
    error: JsonRpcErrorObject | None = None

    @property
    def has_result(self) -> bool:
        """True if the `result` key was present, even with a null value."""
        return "result" in self.model_fields_set

    @property
    def has_error(self) -> bool:
        return "error" in self.model_fields_set and self.error is not None


def render_param(value: Any) -> Any:
    """Render one parameter into a JSON-compatible value.

    Objects exposing `to_rpc()` render themselves; pydantic models dump with
    their aliases and without unset optionals. Anything else that is not
    JSON-native is a programming error.
    """
    to_rpc = getattr(value, "to_rpc", None)
    if callable(to_rpc):
        return to_rpc()
    if isinstance(value, Enum):
        return render_param(value.value)
    if isinstance(value, BaseModel):
        try:
            return value.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise UnserializableParamError(f"Failed to encode rpc request: {e}") from e
    if isinstance(value, float) and not math.isfinite(value):
        raise UnserializableParamError(f"Failed to encode rpc request: {value} is not valid JSON")
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (list, tuple)):
        return [render_param(item) for item in value]
    if isinstance(value, dict):
        rendered: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise UnserializableParamError(f"Non-string object key: {key!r}")
            rendered[key] = render_param(item)
        return rendered
    raise UnserializableParamError(
        f"Failed to encode rpc request: {type(value).__name__} is not serializable"
    )


def render_params(params: Sequence[Any]) -> list[Any]:
    """Render an ordered parameter list. Order is preserved as given."""
    return [render_param(p) for p in params]


def encode_request(
    method: str,
    params: Sequence[Any],
    *,
    version: str | None = JSONRPC_VERSION,
) -> str:
    """Render a method call into the wire envelope.

    Args:
        method: Remote method name, e.g. "eth_blockNumber"
        params: Positional parameters in the order the remote method expects
        version: Value of the "jsonrpc" tag, or None to omit it

    Raises:
        UnserializableParamError: If a parameter cannot be rendered
    """
    request = JsonRpcRequest(
        jsonrpc=version,
        method=method,
        params=render_params(params),
    )
    exclude = {"jsonrpc"} if version is None else None
    try:
        return request.model_dump_json(exclude=exclude)
    except PydanticSerializationError as e:
        raise UnserializableParamError(f"Failed to encode rpc request: {e}") from e


@lru_cache(maxsize=256)
def _adapter(expected: Any) -> TypeAdapter[Any]:
    return TypeAdapter(expected)


def decode_result(value: Any, expected: type[T]) -> T:
    """Validate an already-parsed `result` payload as `expected`.

    Validation is strict against the payload's JSON form: no coercion of
    "16" to int, 1 to bool or 2.0 to int.

    Raises:
        DecodeError: If the payload does not have the expected shape
    """
    try:
        return _adapter(expected).validate_json(to_json(value), strict=True)
    except (ValidationError, PydanticSerializationError) as e:
        raise DecodeError(f"Invalid result for {_type_name(expected)}: {e}") from e


def decode_response(raw: bytes | str, expected: type[T]) -> T:
    """Parse a response envelope and return its result as `expected`.

    Raises:
        DecodeError: Not a valid envelope, both/neither of result and error
            present, or the result does not match `expected`
        RpcError: The node reported an error
    """
    try:
        response = JsonRpcResponse.model_validate_json(raw, strict=True)
    except ValidationError as e:
        raise DecodeError(f"Failed to decode the rpc response: {e}") from e

    error = response.error if response.has_error else None
    if error is not None:
        if response.has_result:
            raise DecodeError("Invalid rpc response: both result and error present")
        logger.debug(f"RPC error {error.code}: {error.message}")
        raise RpcError(code=error.code, message=error.message, data=error.data)

    if not response.has_result:
        raise DecodeError("Invalid rpc response: neither result nor error present")

    return decode_result(response.result, expected)


def _type_name(expected: Any) -> str:
    return getattr(expected, "__name__", None) or repr(expected)
