"""
Field metadata records for the XRPL binary format.

Each serialized field is identified by a (type code, field code) pair. The pair
fixes the canonical position of the field inside an object and the 1-3 byte
header written in front of its value.
"""

from __future__ import annotations
from typing import Any, Dict, List, Tuple
from pydantic import BaseModel, Field


class FieldInfo(BaseModel):
    """
    Immutable description of one protocol field.

    Matches one row of the FIELDS table in definitions.json:
        ["Account", {"nth": 1, "isVLEncoded": true, "isSerialized": true,
                     "isSigningField": true, "type": "AccountID"}]
    """
    name: str = Field(description="Field name as it appears in JSON")
    type_name: str = Field(alias="type", description="Name of the field's type")
    type_code: int = Field(alias="typeCode", description="Numeric code of the field's type")
    field_code: int = Field(alias="nth", description="Code disambiguating fields that share a type")
    is_variable_length: bool = Field(alias="isVLEncoded", description="Value is length-prefixed")
    is_serialized: bool = Field(alias="isSerialized", description="Field appears in binary encodings")
    is_signing_field: bool = Field(alias="isSigningField", description="Field is covered by signatures")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def ordinal(self) -> int:
        """Canonical sort key: type code first, then field code."""
        return (self.type_code << 16) | self.field_code

    @property
    def header(self) -> bytes:
        """Encoded field header for this field."""
        return encode_field_header(self.type_code, self.field_code)

    def __str__(self) -> str:
        return self.name


class DefinitionsFile(BaseModel):
    """Raw shape of definitions.json."""
    types: Dict[str, int] = Field(alias="TYPES")
    fields: List[Tuple[str, Dict[str, Any]]] = Field(alias="FIELDS")
    transaction_types: Dict[str, int] = Field(alias="TRANSACTION_TYPES")
    ledger_entry_types: Dict[str, int] = Field(alias="LEDGER_ENTRY_TYPES")
    transaction_results: Dict[str, int] = Field(alias="TRANSACTION_RESULTS")

    model_config = {"populate_by_name": True}


def encode_field_header(type_code: int, field_code: int) -> bytes:
    """
    Encode a (type code, field code) pair as a 1-3 byte field header.

    Codes below 16 share a single byte as high and low nibble; larger codes
    spill into following bytes with a zero nibble left in their place.

    Args:
        type_code: Type code (1-255)
        field_code: Field code (1-255)

    Returns:
        Header bytes

    Raises:
        ValueError: If either code is out of range
    """
    if not 1 <= type_code <= 255 or not 1 <= field_code <= 255:
        raise ValueError(f"Field header codes out of range: type={type_code}, field={field_code}")

    if type_code < 16:
        if field_code < 16:
            return bytes([(type_code << 4) | field_code])
        return bytes([type_code << 4, field_code])
    if field_code < 16:
        return bytes([field_code, type_code])
    return bytes([0, type_code, field_code])
