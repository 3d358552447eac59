"""
Base class for typed values.

Every protocol type converts between a JSON value and its canonical bytes:

    from_value(json)       -> typed value   (MalformedInputError on bad shape)
    from_parser(reader)    -> typed value   (TruncatedInputError / InvalidEncodingError)
    to_json()              -> JSON value
    write_to(writer)       -> appends canonical bytes
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional

from ..definitions.registry import Definitions
from ..runtime.errors import MalformedInputError


class SerializedType(ABC):
    """
    A protocol value held as its canonical bytes.

    Args:
        buffer: Canonical encoding of the value
    """

    def __init__(self, buffer: bytes):
        self._buffer = bytes(buffer)

    @classmethod
    @abstractmethod
    def from_value(cls, value: Any, definitions: Optional[Definitions] = None) -> SerializedType:
        """
        Build a typed value from its JSON representation.

        Args:
            value: JSON value
            definitions: Field registry, only consulted by container types

        Returns:
            Typed value
        """

    @classmethod
    @abstractmethod
    def from_parser(cls, reader, length_hint: Optional[int] = None) -> SerializedType:
        """
        Read a typed value from a BinaryReader.

        Args:
            reader: Reader positioned at the value
            length_hint: Payload length for variable-length fields

        Returns:
            Typed value
        """

    @abstractmethod
    def to_json(self) -> Any:
        """Return the JSON representation of the value."""

    def to_bytes(self) -> bytes:
        return self._buffer

    def to_hex(self) -> str:
        return self.to_bytes().hex().upper()

    def write_to(self, writer) -> None:
        """Append the canonical bytes of this value to a BinaryWriter."""
        writer.bytes(self.to_bytes())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SerializedType):
            return False
        return type(self) is type(other) and self.to_bytes() == other.to_bytes()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.to_bytes()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_hex()})"


def hex_to_bytes(value: Any, type_name: str) -> bytes:
    """
    Decode a JSON hex string.

    Raises:
        MalformedInputError: If value is not a string of hex digits
    """
    if not isinstance(value, str):
        raise MalformedInputError(
            f"{type_name} must be a hex string, got {type(value).__name__}"
        )
    try:
        return bytes.fromhex(value)
    except ValueError as e:
        raise MalformedInputError(f"Invalid hex string for {type_name}: {value!r}", cause=e)
