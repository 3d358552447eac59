"""
Fixed-size hash types: Hash128, Hash160 and Hash256.
"""

from __future__ import annotations
from typing import Any, Optional

from ..definitions.registry import Definitions
from ..runtime.errors import InvalidEncodingError, MalformedInputError
from .base import SerializedType, hex_to_bytes


class Hash(SerializedType):
    """Base for fixed-width opaque byte strings, written as uppercase hex in JSON."""

    WIDTH = 0

    def __init__(self, buffer: bytes):
        if len(buffer) != self.WIDTH:
            raise MalformedInputError(
                f"{type(self).__name__} must be {self.WIDTH} bytes, got {len(buffer)}",
                details={"expected": self.WIDTH, "actual": len(buffer)},
            )
        super().__init__(buffer)

    @classmethod
    def from_value(cls, value: Any, definitions: Optional[Definitions] = None) -> Hash:
        return cls(hex_to_bytes(value, cls.__name__))

    @classmethod
    def from_parser(cls, reader, length_hint: Optional[int] = None) -> Hash:
        if length_hint is not None and length_hint != cls.WIDTH:
            raise InvalidEncodingError(
                f"{cls.__name__} must be {cls.WIDTH} bytes, length prefix says {length_hint}"
            )
        return cls(reader.bytes(cls.WIDTH))

    def to_json(self) -> str:
        return self.to_hex()


class Hash128(Hash):
    WIDTH = 16


class Hash160(Hash):
    WIDTH = 20


class Hash256(Hash):
    WIDTH = 32
