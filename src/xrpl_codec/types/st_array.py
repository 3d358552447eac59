"""
STArray: ordered list of single-field objects, closed by the array end marker.

JSON shape: [{"Memo": {...}}, {"Memo": {...}}]
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple

from ..definitions.field_info import FieldInfo
from ..definitions.registry import Definitions, get_definitions
from ..runtime.errors import InvalidEncodingError, MalformedInputError, TruncatedInputError
from .base import SerializedType
from .st_object import STObject

ARRAY_END_MARKER_NAME = "ArrayEndMarker"


class STArray(SerializedType):
    """
    Array of wrapped objects.

    Args:
        items: (wrapper field, object) pairs in array order
    """

    def __init__(self, items: List[Tuple[FieldInfo, STObject]]):
        self._items = list(items)

    @classmethod
    def from_value(cls, value: Any, definitions: Optional[Definitions] = None) -> STArray:
        if not isinstance(value, list):
            raise MalformedInputError(
                f"STArray must be a list, got {type(value).__name__}"
            )
        definitions = definitions or get_definitions()

        items: List[Tuple[FieldInfo, STObject]] = []
        for element in value:
            if not isinstance(element, dict) or len(element) != 1:
                raise MalformedInputError(
                    "STArray elements must be objects with exactly one field"
                )
            (name, inner), = element.items()
            field = definitions.get_field_instance(name)
            if field is None or field.type_name != "STObject":
                raise MalformedInputError(
                    f"STArray element field must be an STObject field: {name}",
                    details={"field": name},
                )
            items.append((field, STObject.from_value(inner, definitions)))
        return cls(items)

    @classmethod
    def from_parser(cls, reader, length_hint: Optional[int] = None) -> STArray:
        items: List[Tuple[FieldInfo, STObject]] = []
        while not reader.eof:
            field = reader.read_field()
            if field.name == ARRAY_END_MARKER_NAME:
                return cls(items)
            if field.type_name != "STObject":
                raise InvalidEncodingError(
                    f"STArray element must be an STObject field, got {field.name}"
                )
            items.append((field, STObject.from_parser(reader, nested=True)))
        raise TruncatedInputError("Array ended without an ArrayEndMarker")

    def write_to(self, writer) -> None:
        # Import here to avoid circular imports
        from ..codec.writer import ARRAY_END_MARKER

        for field, obj in self._items:
            writer.write_field(field, obj)
        writer.bytes(ARRAY_END_MARKER)

    def to_bytes(self) -> bytes:
        # Import here to avoid circular imports
        from ..codec.writer import BinaryWriter

        writer = BinaryWriter()
        self.write_to(writer)
        return writer.to_bytes()

    def to_json(self) -> List[Dict[str, Any]]:
        return [{field.name: obj.to_json()} for field, obj in self._items]

    def __len__(self) -> int:
        return len(self._items)
