"""
Field registry backed by the bundled definitions table.

The table is protocol-defined and read-only. A single shared instance is built
on first use (safe under concurrent first access) and never mutated; callers
that need a different table construct their own Definitions and inject it.
"""

from __future__ import annotations
import json
import logging
import threading
from importlib import resources
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from ..runtime.errors import InvalidEncodingError, MalformedInputError, UnknownFieldError
from .field_info import DefinitionsFile, FieldInfo

logger = logging.getLogger(__name__)

DEFINITIONS_RESOURCE = "definitions.json"

# Fields whose UInt values are written as names in JSON
_TRANSACTION_TYPE = "TransactionType"
_LEDGER_ENTRY_TYPE = "LedgerEntryType"
_TRANSACTION_RESULT = "TransactionResult"


class Definitions:
    """
    Immutable lookup tables for fields, types and enumerated field values.

    Args:
        raw: Parsed definitions document
    """

    def __init__(self, raw: DefinitionsFile):
        self._type_codes: Dict[str, int] = dict(raw.types)
        self._fields_by_name: Dict[str, FieldInfo] = {}
        self._fields_by_header: Dict[Tuple[int, int], FieldInfo] = {}

        for name, meta in raw.fields:
            type_name = meta["type"]
            if type_name not in self._type_codes:
                raise ValueError(f"Field {name} refers to unknown type {type_name}")
            info = FieldInfo(name=name, typeCode=self._type_codes[type_name], **meta)
            self._fields_by_name[name] = info
            if not info.is_serialized:
                continue
            key = (info.type_code, info.field_code)
            if key in self._fields_by_header:
                raise ValueError(
                    f"Fields {self._fields_by_header[key].name} and {name} share codes {key}"
                )
            self._fields_by_header[key] = info

        self._enums: Dict[str, Dict[str, int]] = {
            _TRANSACTION_TYPE: dict(raw.transaction_types),
            _LEDGER_ENTRY_TYPE: dict(raw.ledger_entry_types),
            _TRANSACTION_RESULT: dict(raw.transaction_results),
        }
        self._enum_names: Dict[str, Dict[int, str]] = {
            field: {code: name for name, code in table.items()}
            for field, table in self._enums.items()
        }

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> Definitions:
        """
        Load definitions from a JSON file, or from the bundled table.

        Args:
            path: Optional path to a definitions.json file

        Returns:
            Definitions instance
        """
        if path is None:
            text = resources.files(__package__).joinpath(DEFINITIONS_RESOURCE).read_text(encoding="utf-8")
            source = f"{__package__}/{DEFINITIONS_RESOURCE}"
        else:
            text = Path(path).read_text(encoding="utf-8")
            source = str(path)

        definitions = cls(DefinitionsFile.model_validate(json.loads(text)))
        logger.info(
            f"Loaded {len(definitions._fields_by_name)} field definitions "
            f"({len(definitions._type_codes)} types) from {source}"
        )
        return definitions

    def get_field_instance(self, name: str) -> Optional[FieldInfo]:
        """Return the field named `name`, or None if the table has no such field."""
        return self._fields_by_name.get(name)

    def get_field(self, name: str) -> FieldInfo:
        """
        Return the field named `name`.

        Raises:
            UnknownFieldError: If the table has no such field
        """
        info = self._fields_by_name.get(name)
        if info is None:
            raise UnknownFieldError(f"Unknown field: {name}", details={"field": name})
        return info

    def get_field_by_header(self, type_code: int, field_code: int) -> FieldInfo:
        """
        Resolve a decoded field header to its field.

        Raises:
            UnknownFieldError: If no serialized field carries these codes
        """
        info = self._fields_by_header.get((type_code, field_code))
        if info is None:
            raise UnknownFieldError(
                f"No field with type code {type_code} and field code {field_code}",
                details={"type_code": type_code, "field_code": field_code},
            )
        return info

    def is_signing_field(self, name: str) -> bool:
        """Fields missing from the table are treated as non-signing."""
        info = self._fields_by_name.get(name)
        return info is not None and info.is_signing_field

    def get_type_code(self, type_name: str) -> int:
        return self._type_codes[type_name]

    def has_enum(self, field_name: str) -> bool:
        """True if the field's JSON values are names from an enumeration table."""
        return field_name in self._enums

    def enum_to_code(self, field_name: str, value: str) -> int:
        """
        Map an enumerated name such as "Payment" to its numeric code.

        Raises:
            MalformedInputError: If the name is not in the table
        """
        table = self._enums[field_name]
        if value not in table:
            raise MalformedInputError(
                f"Unknown {field_name} value: {value}",
                details={"field": field_name, "value": value},
            )
        return table[value]

    def code_to_enum(self, field_name: str, code: int) -> str:
        """
        Map a numeric code back to its enumerated name.

        Raises:
            InvalidEncodingError: If the code is not in the table
        """
        names = self._enum_names[field_name]
        if code not in names:
            raise InvalidEncodingError(
                f"Unknown {field_name} code: {code}",
                details={"field": field_name, "code": code},
            )
        return names[code]

    def __len__(self) -> int:
        return len(self._fields_by_name)


_definitions: Optional[Definitions] = None
_definitions_lock = threading.Lock()


def get_definitions() -> Definitions:
    """Get the shared definitions, loading the bundled table on first use."""
    global _definitions
    if _definitions is None:
        with _definitions_lock:
            if _definitions is None:
                _definitions = Definitions.load()
    return _definitions
