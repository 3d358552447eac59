"""
Hash primitives for the XRP Ledger.
"""

from .hash_utils import checksum, double_sha256, sha512_half

__all__ = [
    "checksum",
    "double_sha256",
    "sha512_half",
]
