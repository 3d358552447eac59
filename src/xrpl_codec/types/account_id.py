"""
AccountID: 20-byte account identifier, a classic address in JSON.
"""

from __future__ import annotations
import re
from typing import Any, Optional

from ..addresses.codec import AddressCodec
from ..definitions.registry import Definitions
from ..runtime.errors import DecodeError, MalformedInputError
from .hash import Hash160

_HEX_REGEX = re.compile(r"^[0-9A-Fa-f]{40}$")


class AccountID(Hash160):
    """
    Account identifier.

    Accepts a classic address, 40 hex digits, or an X-Address that carries no
    tag. Always serializes to JSON as a classic address.
    """

    @classmethod
    def from_value(cls, value: Any, definitions: Optional[Definitions] = None) -> AccountID:
        if not isinstance(value, str):
            raise MalformedInputError(
                f"AccountID must be a string, got {type(value).__name__}"
            )
        if _HEX_REGEX.match(value):
            return cls(bytes.fromhex(value))
        if AddressCodec.is_valid_x_address(value):
            decoded = AddressCodec.decode_x_address(value)
            if decoded.tag is not None:
                raise MalformedInputError(
                    "X-Address with a tag cannot be used outside a transaction object",
                    details={"address": value},
                )
            return cls(decoded.account_id)
        try:
            return cls(AddressCodec.decode_account_id(value))
        except DecodeError as e:
            raise MalformedInputError(f"Invalid account address: {value!r}", cause=e)

    def to_json(self) -> str:
        return AddressCodec.encode_account_id(self._buffer)
