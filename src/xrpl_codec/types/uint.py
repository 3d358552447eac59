"""
Unsigned integer types: UInt8, UInt16, UInt32 and UInt64.

All are fixed width and big-endian. UInt8/16/32 are JSON numbers; UInt64 is a
hex string in JSON since its range exceeds what JSON numbers carry safely.
"""

from __future__ import annotations
import re
from typing import Any, Optional

from ..definitions.registry import Definitions
from ..runtime.errors import MalformedInputError
from .base import SerializedType

_HEX_REGEX = re.compile(r"^[0-9A-Fa-f]{1,16}$")
_DECIMAL_REGEX = re.compile(r"^[0-9]+$")


class UInt(SerializedType):
    """Base for fixed-width unsigned integers."""

    WIDTH = 0

    @classmethod
    def from_int(cls, value: int) -> UInt:
        if value < 0 or value >= 1 << (8 * cls.WIDTH):
            raise MalformedInputError(
                f"{cls.__name__} value out of range: {value}",
                details={"value": value, "width": cls.WIDTH},
            )
        return cls(value.to_bytes(cls.WIDTH, byteorder="big"))

    @classmethod
    def from_value(cls, value: Any, definitions: Optional[Definitions] = None) -> UInt:
        if isinstance(value, bool):
            raise MalformedInputError(f"{cls.__name__} cannot be a boolean")
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, str) and _DECIMAL_REGEX.match(value):
            return cls.from_int(int(value))
        raise MalformedInputError(
            f"{cls.__name__} must be an integer, got {value!r}"
        )

    @classmethod
    def from_parser(cls, reader, length_hint: Optional[int] = None) -> UInt:
        return cls(reader.bytes(cls.WIDTH))

    @property
    def value(self) -> int:
        return int.from_bytes(self._buffer, byteorder="big")

    def to_json(self) -> Any:
        return self.value


class UInt8(UInt):
    WIDTH = 1


class UInt16(UInt):
    WIDTH = 2


class UInt32(UInt):
    WIDTH = 4


class UInt64(UInt):
    """64-bit unsigned integer, written in JSON as up to 16 hex digits."""

    WIDTH = 8

    @classmethod
    def from_value(cls, value: Any, definitions: Optional[Definitions] = None) -> UInt64:
        if isinstance(value, bool):
            raise MalformedInputError("UInt64 cannot be a boolean")
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, str) and _HEX_REGEX.match(value):
            return cls.from_int(int(value, 16))
        raise MalformedInputError(
            f"UInt64 must be a hex string of at most 16 digits, got {value!r}"
        )

    def to_json(self) -> str:
        return self.to_hex()
