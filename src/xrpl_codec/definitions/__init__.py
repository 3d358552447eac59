"""
Protocol field definitions.

- field_info.py: FieldInfo records and field header encoding
- registry.py: Definitions lookup tables and the shared, lazily loaded instance
- definitions.json: the bundled, versioned field table
"""

from .field_info import FieldInfo, encode_field_header
from .registry import Definitions, get_definitions

__all__ = [
    "FieldInfo",
    "Definitions",
    "encode_field_header",
    "get_definitions",
]
