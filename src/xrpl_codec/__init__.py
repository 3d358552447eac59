"""
XRPL Codec

Canonical binary codec for XRP Ledger transactions and ledger objects, and the
checksum-encoded address/seed format it embeds.
"""

from .runtime.errors import *
from .definitions import Definitions, FieldInfo, get_definitions
from .codec import (
    BinaryCodec,
    BinaryReader,
    BinaryWriter,
    decode,
    encode,
    encode_for_multisigning,
    encode_for_signing,
    encode_for_signing_claim,
    transaction_hash,
)
from .addresses import (
    AddressBase58,
    AddressCodec,
    ClassicAddress,
    Decoded,
    DecodedXAddress,
    Version,
    VersionType,
)
from .keys import Seed

__version__ = "1.0.0"
__all__ = [
    # Binary codec
    "BinaryCodec",
    "BinaryReader",
    "BinaryWriter",
    "decode",
    "encode",
    "encode_for_multisigning",
    "encode_for_signing",
    "encode_for_signing_claim",
    "transaction_hash",

    # Field registry
    "Definitions",
    "FieldInfo",
    "get_definitions",

    # Addresses and seeds
    "AddressBase58",
    "AddressCodec",
    "ClassicAddress",
    "Decoded",
    "DecodedXAddress",
    "Version",
    "VersionType",
    "Seed",

    # Errors
    "ErrorCode",
    "XRPLCodecError",
    "InvalidArgumentError",
    "MalformedInputError",
    "TruncatedInputError",
    "InvalidEncodingError",
    "UnknownFieldError",
    "EncodeError",
    "DecodeError",
    "InvalidPrefixError",
    "Unsupported64BitTagError",
    "NonZeroTagBytesWithNoTagError",
    "SeedDestroyedError",
]
