"""
STObject: mapping of field name to typed value.

Members are kept sorted by (type code, field code), which is the only order
they are ever written in; this is what makes the encoding independent of JSON
key order. A nested object is closed by the object end marker, a top-level
object by the end of the buffer.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..addresses.codec import AddressCodec
from ..definitions.field_info import FieldInfo
from ..definitions.registry import Definitions, get_definitions
from ..runtime.errors import MalformedInputError, TruncatedInputError, UnknownFieldError
from .base import SerializedType

logger = logging.getLogger(__name__)

OBJECT_END_MARKER_NAME = "ObjectEndMarker"

# Account fields that may hold an X-Address, and where its tag goes
_X_ADDRESS_TAG_FIELDS = {
    "Account": "SourceTag",
    "Destination": "DestinationTag",
}


def _expand_x_addresses(value: Dict[str, Any]) -> Dict[str, Any]:
    """Replace X-Addresses with classic addresses, moving their tags to the tag fields."""
    expanded = dict(value)
    for account_field, tag_field in _X_ADDRESS_TAG_FIELDS.items():
        address = expanded.get(account_field)
        if not isinstance(address, str) or not AddressCodec.is_valid_x_address(address):
            continue
        classic = AddressCodec.x_address_to_classic_address(address)
        expanded[account_field] = classic.classic_address
        if classic.tag is None:
            continue
        if tag_field in expanded:
            raise MalformedInputError(
                f"Cannot have {account_field} X-Address tag and {tag_field}",
                details={"field": account_field, "tag_field": tag_field},
            )
        expanded[tag_field] = classic.tag
    return expanded


class STObject(SerializedType):
    """
    Object of protocol fields.

    Args:
        members: (field, value) pairs
        definitions: Field registry used for enumerated values in to_json()
    """

    def __init__(self, members: List[Tuple[FieldInfo, SerializedType]],
                 definitions: Optional[Definitions] = None):
        self._members = list(members)
        self._definitions = definitions or get_definitions()

    @classmethod
    def from_value(cls, value: Any, definitions: Optional[Definitions] = None) -> STObject:
        # Import here to avoid circular imports
        from . import get_type

        if not isinstance(value, dict):
            raise MalformedInputError(
                f"STObject must be a JSON object, got {type(value).__name__}"
            )
        definitions = definitions or get_definitions()

        members: List[Tuple[FieldInfo, SerializedType]] = []
        for name, item in _expand_x_addresses(value).items():
            field = definitions.get_field_instance(name)
            if field is None:
                raise MalformedInputError(f"Unknown field: {name}", details={"field": name})
            if not field.is_serialized:
                continue
            if definitions.has_enum(name) and isinstance(item, str):
                item = definitions.enum_to_code(name, item)
            try:
                type_cls = get_type(field.type_name)
            except UnknownFieldError as e:
                raise MalformedInputError(str(e.message), details={"field": name}, cause=e)
            try:
                members.append((field, type_cls.from_value(item, definitions)))
            except MalformedInputError as e:
                e.details.setdefault("field", name)
                raise

        members.sort(key=lambda member: member[0].ordinal)
        return cls(members, definitions)

    @classmethod
    def from_parser(cls, reader, length_hint: Optional[int] = None, nested: bool = False) -> STObject:
        """
        Read object members until the end marker (nested) or the end of the buffer.

        Args:
            reader: BinaryReader positioned at the first member
            length_hint: Unused
            nested: True when the object is closed by an end marker
        """
        members: List[Tuple[FieldInfo, SerializedType]] = []
        while not reader.eof:
            field = reader.read_field()
            if field.name == OBJECT_END_MARKER_NAME:
                return cls(members, reader.definitions)
            members.append((field, reader.read_field_value(field)))
        if nested:
            raise TruncatedInputError("Nested object ended without an ObjectEndMarker")
        return cls(members, reader.definitions)

    def write_to(self, writer) -> None:
        for field, value in self._members:
            writer.write_field(field, value)

    def to_bytes(self) -> bytes:
        # Import here to avoid circular imports
        from ..codec.writer import BinaryWriter

        writer = BinaryWriter()
        self.write_to(writer)
        return writer.to_bytes()

    def to_json(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for field, value in self._members:
            json_value = value.to_json()
            if self._definitions.has_enum(field.name):
                json_value = self._definitions.code_to_enum(field.name, json_value)
            result[field.name] = json_value
        return result

    def __iter__(self) -> Iterator[Tuple[FieldInfo, SerializedType]]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __getitem__(self, name: str) -> SerializedType:
        for field, value in self._members:
            if field.name == name:
                return value
        raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        return any(field.name == name for field, _ in self._members)
