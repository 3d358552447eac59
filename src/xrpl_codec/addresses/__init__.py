"""
Address and seed codec.

- base58.py: checksummed Base58 in the XRP Ledger alphabet
- codec.py: account ids, public keys, seeds and X-Addresses
- models.py: versions and decoded records
"""

from .base58 import AddressBase58, XRPL_ALPHABET
from .codec import AddressCodec
from .models import ClassicAddress, Decoded, DecodedXAddress, Version, VersionType

__all__ = [
    "AddressBase58",
    "AddressCodec",
    "ClassicAddress",
    "Decoded",
    "DecodedXAddress",
    "Version",
    "VersionType",
    "XRPL_ALPHABET",
]
