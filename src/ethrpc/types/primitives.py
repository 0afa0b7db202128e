"""Wire value types.

Ethereum JSON-RPC encodes binary data and quantities as 0x-prefixed hex
strings. Each type here renders itself with `to_rpc()` and validates from
the wire form through pydantic, so it can be used both as a request
parameter and as an expected result type.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


def _parse_hex(value: str) -> bytes:
    digits = value[2:] if value[:2].lower() == "0x" else value
    if len(digits) % 2:
        raise ValueError(f"Odd-length hex string: {value!r}")
    return bytes.fromhex(digits)


class Bytes(bytes):
    """Arbitrary-length binary data, rendered as 0x-prefixed hex."""

    size: ClassVar[int | None] = None

    def __new__(cls, value: bytes | bytearray | str = b"") -> Bytes:
        raw = _parse_hex(value) if isinstance(value, str) else bytes(value)
        if cls.size is not None and len(raw) != cls.size:
            raise ValueError(f"{cls.__name__} expects {cls.size} bytes, got {len(raw)}")
        return super().__new__(cls, raw)

    @classmethod
    def from_low_u64_be(cls, value: int) -> Bytes:
        """Big-endian encode `value` into the low bytes of a fixed-size value."""
        if cls.size is None:
            raise TypeError(f"{cls.__name__} has no fixed size")
        return cls(value.to_bytes(cls.size, "big"))

    def to_rpc(self) -> str:
        return "0x" + self.hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_rpc()!r})"

    @classmethod
    def _validate(cls, value: Any) -> Bytes:
        if isinstance(value, cls):
            return value
        if isinstance(value, (str, bytes, bytearray)):
            return cls(value)
        raise ValueError(f"Expected hex string for {cls.__name__}, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_rpc, when_used="json"
            ),
        )


class H160(Bytes):
    """20-byte value (account address)."""

    size = 20


class H256(Bytes):
    """32-byte value (block/transaction hash, storage slot)."""

    size = 32


Address = H160


class Quantity(int):
    """Unsigned integer rendered as minimal 0x-prefixed hex."""

    bits: ClassVar[int] = 256

    def __new__(cls, value: int | str = 0) -> Quantity:
        if isinstance(value, bool):
            raise TypeError(f"{cls.__name__} does not accept bool")
        if isinstance(value, str):
            number = int(value, 16) if value[:2].lower() == "0x" else int(value)
        else:
            number = int(value)
        if not 0 <= number < 1 << cls.bits:
            raise ValueError(f"{number} does not fit in {cls.__name__}")
        return super().__new__(cls, number)

    def to_rpc(self) -> str:
        return hex(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_rpc()})"

    @classmethod
    def _validate(cls, value: Any) -> Quantity:
        if isinstance(value, cls):
            return value
        if isinstance(value, (int, str)) and not isinstance(value, bool):
            return cls(value)
        raise ValueError(f"Expected integer or hex string for {cls.__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_rpc, when_used="json"
            ),
        )


class U64(Quantity):
    bits = 64


class U256(Quantity):
    bits = 256


# Trace position index
Index = U64


class BlockTag(str, Enum):
    """Symbolic block references."""

    LATEST = "latest"
    EARLIEST = "earliest"
    PENDING = "pending"


# A block tag or an explicit block number
BlockNumber = Union[BlockTag, U64]

# A block number or a block hash
BlockId = Union[BlockTag, U64, H256]
