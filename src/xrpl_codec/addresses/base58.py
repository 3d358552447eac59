"""
Checksummed Base58 in the XRP Ledger alphabet.

A checksum-encoded string is Base58(version || payload || checksum) where the
checksum is the first 4 bytes of SHA256(SHA256(version || payload)).
"""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence

import base58

from ..crypto.hash_utils import checksum
from ..runtime.errors import DecodeError, EncodeError
from .models import Decoded, Version, VersionType

logger = logging.getLogger(__name__)

XRPL_ALPHABET = base58.XRP_ALPHABET

CHECKSUM_LENGTH = 4


class AddressBase58:
    """Versioned, checksummed Base58 encoding."""

    @staticmethod
    def encode_raw(data: bytes) -> str:
        """Base58-encode bytes with no version or checksum handling."""
        return base58.b58encode(bytes(data), alphabet=XRPL_ALPHABET).decode("ascii")

    @staticmethod
    def decode_raw(encoded: str) -> bytes:
        """
        Base58-decode a string with no version or checksum handling.

        Raises:
            DecodeError: If the string contains characters outside the alphabet
        """
        if not isinstance(encoded, str):
            raise DecodeError(f"Encoded value must be a string, got {type(encoded).__name__}")
        try:
            return base58.b58decode(encoded, alphabet=XRPL_ALPHABET)
        except ValueError as e:
            raise DecodeError(f"Invalid Base58 string: {encoded!r}", cause=e)

    @staticmethod
    def encode_checked(data: bytes) -> str:
        """
        Append the 4-byte checksum and Base58-encode.

        Args:
            data: Bytes to encode, including any version prefix

        Returns:
            Encoded string
        """
        data = bytes(data)
        return AddressBase58.encode_raw(data + checksum(data))

    @staticmethod
    def decode_checked(encoded: str) -> bytes:
        """
        Base58-decode and verify the trailing checksum.

        Args:
            encoded: Encoded string

        Returns:
            Decoded bytes without the checksum

        Raises:
            DecodeError: If the string is malformed or the checksum does not match
        """
        raw = AddressBase58.decode_raw(encoded)
        if len(raw) < CHECKSUM_LENGTH + 1:
            raise DecodeError(f"Encoded value is too short: {encoded!r}")
        body, check = raw[:-CHECKSUM_LENGTH], raw[-CHECKSUM_LENGTH:]
        if checksum(body) != check:
            raise DecodeError("Checksum does not validate", details={"encoded": encoded})
        return body

    @staticmethod
    def encode(payload: bytes, versions: Sequence[Version], expected_length: int) -> str:
        """
        Encode a payload behind a version prefix.

        Args:
            payload: Payload bytes
            versions: Versions to use; the first is written
            expected_length: Required payload length

        Returns:
            Checksum-encoded string

        Raises:
            EncodeError: If the payload length differs from expected_length
        """
        payload = bytes(payload)
        if len(payload) != expected_length:
            raise EncodeError(
                f"Length of bytes does not match expected length: {len(payload)} != {expected_length}",
                details={"expected": expected_length, "actual": len(payload)},
            )
        if not versions:
            raise EncodeError("At least one version is required")
        return AddressBase58.encode_checked(versions[0].prefix + payload)

    @staticmethod
    def decode(
        encoded: str,
        versions: Sequence[Version],
        expected_length: Optional[int] = None,
        version_types: Optional[Sequence[VersionType]] = None,
    ) -> Decoded:
        """
        Decode a checksum-encoded string whose version is one of `versions`.

        Args:
            encoded: Encoded string
            versions: Acceptable versions
            expected_length: Required payload length, if any
            version_types: Key algorithms paired with `versions` by position

        Returns:
            Decoded payload, matched version and its version type

        Raises:
            DecodeError: On bad alphabet, checksum, version or payload length
        """
        body = AddressBase58.decode_checked(encoded)
        types: List[Optional[VersionType]] = list(version_types or [])
        types.extend([None] * (len(versions) - len(types)))

        prefix_matched = False
        for version, version_type in zip(versions, types):
            if not body.startswith(version.prefix):
                continue
            prefix_matched = True
            payload = body[len(version.prefix):]
            if expected_length is not None and len(payload) != expected_length:
                continue
            return Decoded(payload=payload, version=version, version_type=version_type)

        if prefix_matched:
            raise DecodeError(
                f"Payload length does not match expected length {expected_length}",
                details={"expected": expected_length},
            )
        raise DecodeError(
            "Version is invalid. Version bytes do not match any of the provided version bytes.",
            details={"versions": [v.name for v in versions]},
        )
