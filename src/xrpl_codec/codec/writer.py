"""
Binary Writer

Byte accumulator for the canonical binary format. The writer emits bytes in
the order it is given them; canonical field ordering is the responsibility of
the object serialization path.
"""

from typing import List

from ..definitions.field_info import FieldInfo
from ..runtime.errors import InvalidEncodingError

MAX_SINGLE_BYTE_LENGTH = 192
MAX_DOUBLE_BYTE_LENGTH = 12480
MAX_LENGTH_VALUE = 918744

OBJECT_END_MARKER = bytes([0xE1])
ARRAY_END_MARKER = bytes([0xF1])


def encode_vl_length(length: int) -> bytes:
    """
    Encode a variable-length prefix.

    Lengths up to 192 take one byte, up to 12480 two bytes and up to 918744
    three bytes. The first byte alone tells a reader which form follows.

    Args:
        length: Length of the payload in bytes

    Returns:
        Encoded length prefix

    Raises:
        InvalidEncodingError: If length is negative or above 918744
    """
    if length < 0:
        raise InvalidEncodingError(f"Length must be non-negative: {length}")
    if length <= MAX_SINGLE_BYTE_LENGTH:
        return bytes([length])
    if length <= MAX_DOUBLE_BYTE_LENGTH:
        length -= MAX_SINGLE_BYTE_LENGTH + 1
        return bytes([193 + (length >> 8), length & 0xFF])
    if length <= MAX_LENGTH_VALUE:
        length -= MAX_DOUBLE_BYTE_LENGTH + 1
        return bytes([241 + (length >> 16), (length >> 8) & 0xFF, length & 0xFF])
    raise InvalidEncodingError(
        f"Overflow error: length {length} exceeds {MAX_LENGTH_VALUE}",
        details={"length": length},
    )


class BinaryWriter:
    """
    Binary writer for the canonical XRPL encoding.

    Values are written big-endian; typed values write their own payload
    through write_to().
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[int] = []

    def u8(self, v: int) -> None:
        """
        Write unsigned 8-bit integer.

        Args:
            v: Integer value to write (0-255)
        """
        self._bb.append(v & 0xFF)

    def bytes(self, v: bytes) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def vl_length(self, length: int) -> None:
        """Write a variable-length prefix."""
        self.bytes(encode_vl_length(length))

    def len_prefixed_bytes(self, v: bytes) -> None:
        """
        Write bytes preceded by their variable-length prefix.

        Args:
            v: Bytes to write with length prefix
        """
        self.vl_length(len(v))
        self.bytes(v)

    def write_field(self, field: FieldInfo, value) -> None:
        """
        Write a field header followed by its value.

        Variable-length fields get a length prefix; nested objects are closed
        with the object end marker.

        Args:
            field: Field being written
            value: Typed value for the field
        """
        self.bytes(field.header)
        if field.is_variable_length:
            self.len_prefixed_bytes(value.to_bytes())
            return
        value.write_to(self)
        if field.type_name == "STObject":
            self.bytes(OBJECT_END_MARKER)

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)

    def to_hex(self) -> str:
        """Return accumulated bytes as an uppercase hex string."""
        return self.to_bytes().hex().upper()

    def __len__(self) -> int:
        return len(self._bb)
