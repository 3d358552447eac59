"""
Currency: 160-bit currency code.

"XRP" is the all-zero code. Other three-character ISO-style codes sit in
bytes 12..14 with every other byte zero. Anything else is written as 40 hex
digits.
"""

from __future__ import annotations
import re
from typing import Any, Optional

from ..definitions.registry import Definitions
from ..runtime.errors import MalformedInputError
from .hash import Hash160

_ISO_REGEX = re.compile(r"^[A-Za-z0-9?!@#$%^&*<>(){}\[\]|]{3}$")
_HEX_REGEX = re.compile(r"^[0-9A-Fa-f]{40}$")

XRP_CODE = "XRP"


class Currency(Hash160):
    """Currency code."""

    @classmethod
    def from_value(cls, value: Any, definitions: Optional[Definitions] = None) -> Currency:
        if not isinstance(value, str):
            raise MalformedInputError(
                f"Currency must be a string, got {type(value).__name__}"
            )
        if value == XRP_CODE:
            return cls(bytes(20))
        if _ISO_REGEX.match(value):
            return cls(bytes(12) + value.encode("ascii") + bytes(5))
        if _HEX_REGEX.match(value):
            return cls(bytes.fromhex(value))
        raise MalformedInputError(f"Unsupported currency representation: {value!r}")

    @property
    def iso(self) -> Optional[str]:
        """Three-character code, or None for a non-standard code."""
        if self._buffer == bytes(20):
            return XRP_CODE
        if self._buffer[:12] != bytes(12) or self._buffer[15:] != bytes(5):
            return None
        try:
            code = self._buffer[12:15].decode("ascii")
        except UnicodeDecodeError:
            return None
        if not _ISO_REGEX.match(code) or code == XRP_CODE:
            return None
        return code

    def to_json(self) -> str:
        iso = self.iso
        return iso if iso is not None else self.to_hex()
