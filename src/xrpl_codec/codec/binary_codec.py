"""
Binary Codec

Top-level encode/decode operations over the canonical XRPL binary format,
plus the signing encodings that prepend a domain prefix to the encoded
transaction.
"""

from __future__ import annotations
import json
import logging
from typing import Any, Dict, Optional, Union

from ..crypto.hash_utils import sha512_half
from ..definitions.registry import Definitions, get_definitions
from ..runtime.errors import InvalidArgumentError, InvalidEncodingError, MalformedInputError
from ..types import AccountID, Hash256, STObject, UInt64
from .reader import BinaryReader

logger = logging.getLogger(__name__)

TRX_SIGNATURE_PREFIX = "53545800"
TRX_MULTI_SIGNATURE_PREFIX = "534D5400"
PAYMENT_CHANNEL_CLAIM_PREFIX = "434C4D00"
TRANSACTION_ID_PREFIX = "54584E00"

SIGNING_PUB_KEY = "SigningPubKey"

JsonInput = Union[str, Dict[str, Any]]


def _parse_json(value: JsonInput) -> Any:
    if isinstance(value, str):
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            raise MalformedInputError(f"Invalid JSON: {e.msg}", cause=e)
    return value


def _hex_to_bytes(hex_string: str) -> bytes:
    if not isinstance(hex_string, str):
        raise InvalidEncodingError(f"Expected a hex string, got {type(hex_string).__name__}")
    try:
        return bytes.fromhex(hex_string)
    except ValueError as e:
        raise InvalidEncodingError(f"Invalid hex string: {e}", cause=e)


class BinaryCodec:
    """
    Canonical XRPL binary codec.

    Args:
        definitions: Field registry to use (shared instance by default)
    """

    def __init__(self, definitions: Optional[Definitions] = None):
        self.definitions = definitions or get_definitions()

    def encode(self, value: JsonInput) -> str:
        """
        Encode a JSON object to canonical binary.

        Args:
            value: Transaction or ledger object as a dict or JSON string

        Returns:
            Uppercase hex string

        Raises:
            MalformedInputError: If a field value does not match its type
        """
        obj = _parse_json(value)
        logger.debug(f"Encoding object with {len(obj) if isinstance(obj, dict) else 0} fields")
        return STObject.from_value(obj, self.definitions).to_hex()

    def decode(self, hex_string: str) -> Dict[str, Any]:
        """
        Decode canonical binary to a JSON object.

        Args:
            hex_string: Hex string, either case

        Returns:
            Decoded object

        Raises:
            TruncatedInputError: If the buffer ends mid-value
            InvalidEncodingError: If a length or discriminant is out of range
            UnknownFieldError: If a field header matches no field
        """
        reader = BinaryReader(_hex_to_bytes(hex_string), self.definitions)
        obj = STObject.from_parser(reader)
        if not reader.eof:
            raise InvalidEncodingError(
                f"Unexpected ObjectEndMarker at top level with {reader.remaining} bytes remaining"
            )
        logger.debug(f"Decoded object with {len(obj)} fields")
        return obj.to_json()

    def remove_non_signing_fields(self, value: Any) -> Any:
        """
        Keep only the top-level fields flagged as signing fields.

        Fields missing from the registry are dropped. Nested objects and arrays
        are kept or dropped whole, by their own field's flag; their contents are
        not filtered.

        Args:
            value: JSON object

        Returns:
            New object with the signing fields only; non-objects are returned as is
        """
        if not isinstance(value, dict):
            return value
        return {
            name: item for name, item in value.items()
            if self.definitions.is_signing_field(name)
        }

    def encode_for_signing(self, value: JsonInput) -> str:
        """
        Encode a transaction for single signing.

        Args:
            value: Transaction as a dict or JSON string

        Returns:
            Hex string of the single-signing prefix followed by the signing fields
        """
        obj = _parse_json(value)
        return TRX_SIGNATURE_PREFIX + self.encode(self.remove_non_signing_fields(obj))

    def encode_for_multisigning(self, value: JsonInput, signer_account_id: str) -> str:
        """
        Encode a transaction for one signer of a multi-signature.

        SigningPubKey is forced to empty before filtering, and the signer's
        20-byte account id is appended after the encoded body.

        Args:
            value: Transaction as a dict or JSON string
            signer_account_id: Signer's classic address (or 40 hex digits)

        Returns:
            Hex string of the multi-signing prefix, signing fields and account id

        Raises:
            InvalidArgumentError: If value is not a JSON object
        """
        obj = _parse_json(value)
        if not isinstance(obj, dict):
            raise InvalidArgumentError("JSON object required for signing")

        # any existing signing keys should not also be signed
        obj = dict(obj)
        obj[SIGNING_PUB_KEY] = ""
        suffix = AccountID.from_value(signer_account_id).to_hex()
        return TRX_MULTI_SIGNATURE_PREFIX + self.encode(self.remove_non_signing_fields(obj)) + suffix

    def encode_for_signing_claim(self, value: JsonInput) -> str:
        """
        Encode a payment channel claim for signing.

        Args:
            value: Object with "channel" (64 hex digits) and "amount" (drops)

        Returns:
            Hex string of the claim prefix, channel id and amount
        """
        obj = _parse_json(value)
        if not isinstance(obj, dict) or "channel" not in obj or "amount" not in obj:
            raise InvalidArgumentError("Claim requires an object with channel and amount")
        amount = obj["amount"]
        if isinstance(amount, str):
            if not amount.isdigit():
                raise MalformedInputError(f"Claim amount must be a number of drops: {amount!r}")
            amount = int(amount)
        return (
            PAYMENT_CHANNEL_CLAIM_PREFIX
            + Hash256.from_value(obj["channel"]).to_hex()
            + UInt64.from_value(amount).to_hex()
        )

    def transaction_hash(self, signed_hex: str) -> str:
        """
        Compute the id of a signed transaction.

        Args:
            signed_hex: Encoded signed transaction

        Returns:
            Uppercase hex SHA-512Half of the transaction-id prefix and the blob
        """
        blob = _hex_to_bytes(signed_hex)
        return sha512_half(bytes.fromhex(TRANSACTION_ID_PREFIX) + blob).hex().upper()


_default_codec: Optional[BinaryCodec] = None


def _codec() -> BinaryCodec:
    global _default_codec
    if _default_codec is None:
        _default_codec = BinaryCodec()
    return _default_codec


def encode(value: JsonInput) -> str:
    """Encode a JSON object with the shared definitions."""
    return _codec().encode(value)


def decode(hex_string: str) -> Dict[str, Any]:
    """Decode canonical binary with the shared definitions."""
    return _codec().decode(hex_string)


def encode_for_signing(value: JsonInput) -> str:
    return _codec().encode_for_signing(value)


def encode_for_multisigning(value: JsonInput, signer_account_id: str) -> str:
    return _codec().encode_for_multisigning(value, signer_account_id)


def encode_for_signing_claim(value: JsonInput) -> str:
    return _codec().encode_for_signing_claim(value)


def transaction_hash(signed_hex: str) -> str:
    return _codec().transaction_hash(signed_hex)
