"""
Vector256: length-prefixed list of 256-bit hashes.
"""

from __future__ import annotations
from typing import Any, List, Optional

from ..definitions.registry import Definitions
from ..runtime.errors import InvalidEncodingError, MalformedInputError
from .base import SerializedType
from .hash import Hash256

HASH_LENGTH = 32


class Vector256(SerializedType):
    """List of Hash256 values, a list of hex strings in JSON."""

    @classmethod
    def from_value(cls, value: Any, definitions: Optional[Definitions] = None) -> Vector256:
        if not isinstance(value, list):
            raise MalformedInputError(
                f"Vector256 must be a list of hashes, got {type(value).__name__}"
            )
        return cls(b"".join(Hash256.from_value(item).to_bytes() for item in value))

    @classmethod
    def from_parser(cls, reader, length_hint: Optional[int] = None) -> Vector256:
        if length_hint is None:
            raise InvalidEncodingError("Vector256 requires a length prefix")
        if length_hint % HASH_LENGTH:
            raise InvalidEncodingError(
                f"Vector256 length must be a multiple of {HASH_LENGTH}, got {length_hint}"
            )
        return cls(reader.bytes(length_hint))

    def to_json(self) -> List[str]:
        return [
            self._buffer[i : i + HASH_LENGTH].hex().upper()
            for i in range(0, len(self._buffer), HASH_LENGTH)
        ]
