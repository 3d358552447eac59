"""
Binary Reader

Cursor over a canonical XRPL byte buffer. Reads field headers, resolves them
through the field registry and hands the payload to the matching typed value.
"""

import builtins
from typing import Optional, Tuple

from ..definitions.field_info import FieldInfo
from ..definitions.registry import Definitions, get_definitions
from ..runtime.errors import InvalidEncodingError, TruncatedInputError


class BinaryReader:
    """
    Binary reader over an in-memory buffer.

    Args:
        buf: Byte buffer to read from
        definitions: Field registry used to resolve headers (shared instance by default)
    """

    def __init__(self, buf: builtins.bytes, definitions: Optional[Definitions] = None):
        self._buf = builtins.bytes(buf)
        self._off = 0
        self.definitions = definitions or get_definitions()

    @property
    def eof(self) -> bool:
        """
        Check if at end of buffer.

        Returns:
            True if at end of buffer
        """
        return self._off >= len(self._buf)

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._buf) - self._off

    def peek(self) -> int:
        """Return the next byte without consuming it."""
        if self.eof:
            raise TruncatedInputError("Buffer underrun: attempting to peek beyond end")
        return self._buf[self._off]

    def u8(self) -> int:
        """
        Read unsigned 8-bit integer.

        Returns:
            Unsigned 8-bit integer value
        """
        if self._off >= len(self._buf):
            raise TruncatedInputError("Buffer underrun: attempting to read beyond end")
        val = self._buf[self._off]
        self._off += 1
        return val

    def bytes(self, n: int) -> builtins.bytes:
        """
        Read n bytes from buffer.

        Args:
            n: Number of bytes to read

        Returns:
            Bytes of specified length
        """
        if self._off + n > len(self._buf):
            raise TruncatedInputError(
                f"Buffer underrun: attempting to read {n} bytes with {self.remaining} remaining",
                details={"offset": self._off, "requested": n},
            )
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def read_vl_length(self) -> int:
        """
        Read a variable-length prefix.

        Returns:
            Decoded payload length

        Raises:
            InvalidEncodingError: If the first byte is 255
        """
        b1 = self.u8()
        if b1 <= 192:
            return b1
        if b1 <= 240:
            b2 = self.u8()
            return 193 + (b1 - 193) * 256 + b2
        if b1 <= 254:
            b2 = self.u8()
            b3 = self.u8()
            return 12481 + (b1 - 241) * 65536 + b2 * 256 + b3
        raise InvalidEncodingError(f"Length prefix byte out of range: {b1}")

    def read_field_header(self) -> Tuple[int, int]:
        """
        Read a 1-3 byte field header.

        Returns:
            Tuple of (type_code, field_code)
        """
        first = self.u8()
        type_code = first >> 4
        field_code = first & 0x0F

        if type_code == 0:
            type_code = self.u8()
            if type_code < 16:
                raise InvalidEncodingError(
                    f"Type code {type_code} must be written in the header's high nibble"
                )
        if field_code == 0:
            field_code = self.u8()
            if field_code < 16:
                raise InvalidEncodingError(
                    f"Field code {field_code} must be written in the header's low nibble"
                )
        return type_code, field_code

    def read_field(self) -> FieldInfo:
        """
        Read a field header and resolve it to its field.

        Raises:
            UnknownFieldError: If no field carries the decoded codes
        """
        type_code, field_code = self.read_field_header()
        return self.definitions.get_field_by_header(type_code, field_code)

    def read_field_value(self, field: FieldInfo):
        """
        Read the value of `field` from the current position.

        Args:
            field: Field whose value follows

        Returns:
            Typed value
        """
        # Import here to avoid circular imports
        from ..types import STObject, get_type

        type_cls = get_type(field.type_name)
        if field.is_variable_length:
            length = self.read_vl_length()
            start = self._off
            value = type_cls.from_parser(self, length)
            if self._off - start != length:
                raise InvalidEncodingError(
                    f"Field {field.name} consumed {self._off - start} of {length} bytes"
                )
            return value
        if type_cls is STObject:
            return STObject.from_parser(self, nested=True)
        return type_cls.from_parser(self)

    def read_field_and_value(self):
        """Read a field header and its value."""
        field = self.read_field()
        return field, self.read_field_value(field)
