"""
Typed values of the XRPL binary format.

TYPE_REGISTRY maps a type name from the definitions table to the class that
converts values of that type. Adding a protocol type means adding an entry.
"""

from typing import Dict, Type

from ..runtime.errors import UnknownFieldError
from .account_id import AccountID
from .amount import Amount
from .base import SerializedType
from .blob import Blob
from .currency import Currency
from .hash import Hash, Hash128, Hash160, Hash256
from .path_set import PathSet
from .st_array import STArray
from .st_object import STObject
from .uint import UInt, UInt8, UInt16, UInt32, UInt64
from .vector256 import Vector256

TYPE_REGISTRY: Dict[str, Type[SerializedType]] = {
    "UInt8": UInt8,
    "UInt16": UInt16,
    "UInt32": UInt32,
    "UInt64": UInt64,
    "Hash128": Hash128,
    "Hash160": Hash160,
    "Hash256": Hash256,
    "Amount": Amount,
    "Blob": Blob,
    "AccountID": AccountID,
    "STObject": STObject,
    "STArray": STArray,
    "PathSet": PathSet,
    "Vector256": Vector256,
}


def get_type(type_name: str) -> Type[SerializedType]:
    """
    Look up the class for a type name.

    Raises:
        UnknownFieldError: If the type has no binary codec
    """
    type_cls = TYPE_REGISTRY.get(type_name)
    if type_cls is None:
        raise UnknownFieldError(f"No codec for type: {type_name}", details={"type": type_name})
    return type_cls


__all__ = [
    "TYPE_REGISTRY",
    "get_type",
    "SerializedType",
    "AccountID",
    "Amount",
    "Blob",
    "Currency",
    "Hash",
    "Hash128",
    "Hash160",
    "Hash256",
    "PathSet",
    "STArray",
    "STObject",
    "UInt",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "Vector256",
]
