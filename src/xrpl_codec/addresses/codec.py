"""
Address Codec

Encodes and decodes account ids, public keys and seeds as checksum strings,
and packs an account id with an optional destination tag into an X-Address.

X-Address payload (31 bytes, checksum-encoded without a separate version):

    [2-byte network prefix][20-byte account id][flag][4-byte LE tag][4 zero bytes]
"""

from __future__ import annotations
import logging
from typing import Optional

from ..runtime.errors import (
    DecodeError,
    EncodeError,
    InvalidPrefixError,
    NonZeroTagBytesWithNoTagError,
    Unsupported64BitTagError,
)
from .base58 import AddressBase58
from .models import ClassicAddress, Decoded, DecodedXAddress, Version, VersionType

logger = logging.getLogger(__name__)

ACCOUNT_ID_LENGTH = 20
PUBLIC_KEY_LENGTH = 33
SEED_LENGTH = 16

MAIN_PREFIX = bytes([0x05, 0x44])
TEST_PREFIX = bytes([0x04, 0x93])

X_ADDRESS_LENGTH = 31
MAX_TAG = 0xFFFFFFFF


class AddressCodec:
    """Checksum-encoded account ids, public keys, seeds and X-Addresses."""

    @staticmethod
    def encode_seed(entropy: bytes, version_type: VersionType) -> str:
        """
        Encode 16 bytes of seed entropy.

        Args:
            entropy: Seed entropy (16 bytes)
            version_type: Key algorithm the seed is for

        Returns:
            Seed string ("sEd..." for Ed25519, "s..." for secp256k1)
        """
        if len(entropy) != SEED_LENGTH:
            raise EncodeError(f"Entropy must have length {SEED_LENGTH}")
        version = Version.ED25519_SEED if version_type == VersionType.ED25519 else Version.FAMILY_SEED
        return AddressBase58.encode(entropy, [version], SEED_LENGTH)

    @staticmethod
    def decode_seed(seed: str) -> Decoded:
        """
        Decode a seed of either key algorithm.

        Args:
            seed: Seed string

        Returns:
            Decoded entropy with the key algorithm its version implies
        """
        return AddressBase58.decode(
            seed,
            [Version.ED25519_SEED, Version.FAMILY_SEED],
            SEED_LENGTH,
            [VersionType.ED25519, VersionType.SECP256K1],
        )

    @staticmethod
    def encode_account_id(account_id: bytes) -> str:
        """Encode a 20-byte account id as a classic address."""
        return AddressBase58.encode(account_id, [Version.ACCOUNT_ID], ACCOUNT_ID_LENGTH)

    @staticmethod
    def decode_account_id(classic_address: str) -> bytes:
        """Decode a classic address to its 20-byte account id."""
        return AddressBase58.decode(classic_address, [Version.ACCOUNT_ID], ACCOUNT_ID_LENGTH).payload

    @staticmethod
    def encode_node_public_key(public_key: bytes) -> str:
        return AddressBase58.encode(public_key, [Version.NODE_PUBLIC], PUBLIC_KEY_LENGTH)

    @staticmethod
    def decode_node_public_key(public_key: str) -> bytes:
        return AddressBase58.decode(public_key, [Version.NODE_PUBLIC], PUBLIC_KEY_LENGTH).payload

    @staticmethod
    def encode_account_public_key(public_key: bytes) -> str:
        return AddressBase58.encode(public_key, [Version.ACCOUNT_PUBLIC_KEY], PUBLIC_KEY_LENGTH)

    @staticmethod
    def decode_account_public_key(public_key: str) -> bytes:
        return AddressBase58.decode(public_key, [Version.ACCOUNT_PUBLIC_KEY], PUBLIC_KEY_LENGTH).payload

    @staticmethod
    def encode_x_address(account_id: bytes, tag: Optional[int] = None, test: bool = False) -> str:
        """
        Pack an account id and optional tag into an X-Address.

        Args:
            account_id: 20-byte account id
            tag: Optional 32-bit destination tag
            test: True for a test network address

        Returns:
            X-Address string
        """
        if len(account_id) != ACCOUNT_ID_LENGTH:
            raise EncodeError(f"AccountID must be {ACCOUNT_ID_LENGTH} bytes")
        if tag is not None and (isinstance(tag, bool) or not isinstance(tag, int) or not 0 <= tag <= MAX_TAG):
            raise EncodeError(f"Tag must be an unsigned 32-bit integer: {tag!r}")

        flag = 0 if tag is None else 1
        payload = (
            (TEST_PREFIX if test else MAIN_PREFIX)
            + bytes(account_id)
            + bytes([flag])
            + (tag or 0).to_bytes(4, byteorder="little")
            + bytes(4)  # reserved for 64-bit tags
        )
        return AddressBase58.encode_checked(payload)

    @staticmethod
    def decode_x_address(x_address: str) -> DecodedXAddress:
        """
        Unpack an X-Address.

        Raises:
            DecodeError: On bad alphabet, checksum or length
            InvalidPrefixError: If the network prefix is neither main nor test
            Unsupported64BitTagError: If the flag byte is 2 or more
            NonZeroTagBytesWithNoTagError: If an untagged address has tag bytes set
        """
        decoded = AddressBase58.decode_checked(x_address)
        if len(decoded) != X_ADDRESS_LENGTH:
            raise DecodeError(
                f"X-Address payload must be {X_ADDRESS_LENGTH} bytes, got {len(decoded)}"
            )

        prefix = decoded[:2]
        if prefix == MAIN_PREFIX:
            test = False
        elif prefix == TEST_PREFIX:
            test = True
        else:
            raise InvalidPrefixError(details={"prefix": prefix.hex()})

        return DecodedXAddress(
            account_id=decoded[2:22],
            tag=AddressCodec._tag_from_decoded_x_address(decoded),
            test=test,
        )

    @staticmethod
    def _tag_from_decoded_x_address(decoded: bytes) -> Optional[int]:
        flag = decoded[22]
        if flag >= 2:
            raise Unsupported64BitTagError(details={"flag": flag})
        if flag == 1:
            return int.from_bytes(decoded[23:27], byteorder="little")
        if decoded[23:31] != bytes(8):
            raise NonZeroTagBytesWithNoTagError()
        return None

    @staticmethod
    def classic_address_to_x_address(classic_address: str, tag: Optional[int] = None,
                                     test: bool = False) -> str:
        """Convert a classic address and optional tag to an X-Address."""
        account_id = AddressCodec.decode_account_id(classic_address)
        return AddressCodec.encode_x_address(account_id, tag, test)

    @staticmethod
    def x_address_to_classic_address(x_address: str) -> ClassicAddress:
        """Convert an X-Address to its classic address, tag and network."""
        decoded = AddressCodec.decode_x_address(x_address)
        return ClassicAddress(
            classic_address=AddressCodec.encode_account_id(decoded.account_id),
            tag=decoded.tag,
            test=decoded.test,
        )

    @staticmethod
    def is_valid_x_address(x_address: str) -> bool:
        """True if x_address decodes as an X-Address; never raises."""
        try:
            AddressCodec.decode_x_address(x_address)
        except Exception:
            return False
        return True

    @staticmethod
    def is_valid_classic_address(classic_address: str) -> bool:
        """True if classic_address decodes as a classic address; never raises."""
        try:
            AddressCodec.decode_account_id(classic_address)
        except Exception:
            return False
        return True


__all__ = [
    "AddressCodec",
    "MAIN_PREFIX",
    "TEST_PREFIX",
]
