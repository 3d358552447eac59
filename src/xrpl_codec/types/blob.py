"""
Blob: arbitrary bytes, always written behind a length prefix.
"""

from __future__ import annotations
from typing import Any, Optional

from ..definitions.registry import Definitions
from ..runtime.errors import InvalidEncodingError
from .base import SerializedType, hex_to_bytes


class Blob(SerializedType):
    """Variable-length byte string, uppercase hex in JSON."""

    @classmethod
    def from_value(cls, value: Any, definitions: Optional[Definitions] = None) -> Blob:
        return cls(hex_to_bytes(value, "Blob"))

    @classmethod
    def from_parser(cls, reader, length_hint: Optional[int] = None) -> Blob:
        if length_hint is None:
            raise InvalidEncodingError("Blob requires a length prefix")
        return cls(reader.bytes(length_hint))

    def to_json(self) -> str:
        return self.to_hex()
