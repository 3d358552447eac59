"""
XRPL Binary Codec Module

Canonical binary encoding/decoding for transactions and ledger objects.

Key components:
- writer.py: Binary writer with length-prefix and field emission
- reader.py: Binary reader resolving field headers through the registry
- binary_codec.py: encode/decode and the signing encodings
"""

from .binary_codec import (
    BinaryCodec,
    decode,
    encode,
    encode_for_multisigning,
    encode_for_signing,
    encode_for_signing_claim,
    transaction_hash,
)
from .reader import BinaryReader
from .writer import BinaryWriter, encode_vl_length

__all__ = [
    "BinaryCodec",
    "BinaryReader",
    "BinaryWriter",
    "decode",
    "encode",
    "encode_for_multisigning",
    "encode_for_signing",
    "encode_for_signing_claim",
    "encode_vl_length",
    "transaction_hash",
]
