"""
PathSet: list of payment paths, each a list of hops.

Each hop starts with a type byte saying which of account (0x01), currency
(0x10) and issuer (0x20) follow, in that order, 20 bytes each. Paths are
separated by 0xFF and the set ends with 0x00.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from ..definitions.registry import Definitions
from ..runtime.errors import InvalidEncodingError, MalformedInputError
from .account_id import AccountID
from .base import SerializedType
from .currency import Currency

TYPE_ACCOUNT = 0x01
TYPE_CURRENCY = 0x10
TYPE_ISSUER = 0x20

PATH_SEPARATOR_BYTE = 0xFF
PATHSET_END_BYTE = 0x00

_HOP_FIELDS = (
    ("account", TYPE_ACCOUNT, AccountID),
    ("currency", TYPE_CURRENCY, Currency),
    ("issuer", TYPE_ISSUER, AccountID),
)
_ALL_HOP_BITS = TYPE_ACCOUNT | TYPE_CURRENCY | TYPE_ISSUER


def _serialize_hop(hop: Any) -> bytes:
    if not isinstance(hop, dict):
        raise MalformedInputError(f"Path hop must be an object, got {type(hop).__name__}")
    type_byte = 0
    body = b""
    for key, bit, type_cls in _HOP_FIELDS:
        if key in hop:
            type_byte |= bit
            body += type_cls.from_value(hop[key]).to_bytes()
    if not type_byte:
        raise MalformedInputError("Path hop needs at least one of account, currency or issuer")
    return bytes([type_byte]) + body


class PathSet(SerializedType):
    """Set of payment paths."""

    @classmethod
    def from_value(cls, value: Any, definitions: Optional[Definitions] = None) -> PathSet:
        if not isinstance(value, list) or not all(isinstance(path, list) for path in value):
            raise MalformedInputError("PathSet must be a list of paths, each a list of hops")

        buffer = b""
        for index, path in enumerate(value):
            if not path:
                raise MalformedInputError("Paths in a PathSet cannot be empty")
            buffer += b"".join(_serialize_hop(hop) for hop in path)
            buffer += bytes([PATHSET_END_BYTE if index == len(value) - 1 else PATH_SEPARATOR_BYTE])
        if not value:
            buffer = bytes([PATHSET_END_BYTE])
        return cls(buffer)

    @classmethod
    def from_parser(cls, reader, length_hint: Optional[int] = None) -> PathSet:
        buffer = bytearray()
        while True:
            type_byte = reader.u8()
            buffer.append(type_byte)
            if type_byte == PATHSET_END_BYTE:
                break
            if type_byte == PATH_SEPARATOR_BYTE:
                continue
            if type_byte & ~_ALL_HOP_BITS & 0xFF:
                raise InvalidEncodingError(f"Invalid path hop type byte: 0x{type_byte:02X}")
            for _, bit, _ in _HOP_FIELDS:
                if type_byte & bit:
                    buffer += reader.bytes(20)
        return cls(bytes(buffer))

    def to_json(self) -> List[List[Dict[str, str]]]:
        paths: List[List[Dict[str, str]]] = []
        path: List[Dict[str, str]] = []
        pos = 0
        while pos < len(self._buffer):
            type_byte = self._buffer[pos]
            pos += 1
            if type_byte in (PATHSET_END_BYTE, PATH_SEPARATOR_BYTE):
                if path:
                    paths.append(path)
                path = []
                continue
            hop: Dict[str, str] = {}
            for key, bit, type_cls in _HOP_FIELDS:
                if type_byte & bit:
                    hop[key] = type_cls(self._buffer[pos : pos + 20]).to_json()
                    pos += 20
            path.append(hop)
        return paths
