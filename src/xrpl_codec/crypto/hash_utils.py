"""
Hash utilities for the XRP Ledger.

Provides the double SHA-256 used by address checksums and the SHA-512Half
digest used for ledger object and transaction identifiers.
"""

import hashlib


def double_sha256(data: bytes) -> bytes:
    """
    Calculate double SHA256 hash.

    Args:
        data: Data to hash

    Returns:
        SHA256(SHA256(data))
    """
    if not isinstance(data, (bytes, bytearray)):
        raise ValueError("data must be bytes")

    first_hash = hashlib.sha256(data).digest()
    return hashlib.sha256(first_hash).digest()


def checksum(data: bytes) -> bytes:
    """First 4 bytes of the double SHA256 of data."""
    return double_sha256(data)[:4]


def sha512_half(data: bytes) -> bytes:
    """
    Calculate the first half of a SHA512 hash.

    Args:
        data: Data to hash

    Returns:
        First 32 bytes of SHA512(data)
    """
    if not isinstance(data, (bytes, bytearray)):
        raise ValueError("data must be bytes")

    return hashlib.sha512(data).digest()[:32]


__all__ = [
    "double_sha256",
    "checksum",
    "sha512_half",
]
