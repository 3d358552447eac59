"""
Seed key material.

A Seed holds the raw checksum-decoded bytes of a seed string: version prefix,
16 bytes of entropy and checksum. destroy() zeroes those bytes in place and
every later read raises SeedDestroyedError.

Seeds are not safe to share between threads that may call destroy().
"""

from __future__ import annotations
import hashlib
from typing import Any, Union

from ..addresses.base58 import AddressBase58
from ..addresses.codec import SEED_LENGTH, AddressCodec
from ..addresses.models import Decoded, VersionType
from ..runtime.errors import EncodeError, SeedDestroyedError

Passphrase = Union[str, bytes]


def _entropy_from_passphrase(passphrase: Passphrase) -> bytes:
    if isinstance(passphrase, str):
        passphrase = passphrase.encode("utf-8")
    if not isinstance(passphrase, (bytes, bytearray)):
        raise EncodeError(f"Passphrase must be str or bytes, got {type(passphrase).__name__}")
    # 16 bytes of deterministic entropy
    return hashlib.sha512(passphrase).digest()[:SEED_LENGTH]


class Seed:
    """
    Destroyable seed.

    Usable as a context manager; the seed is destroyed on exit, and on garbage
    collection if it never was.

    Args:
        value: Checksum-decoded seed bytes
    """

    def __init__(self, value: bytes):
        self._value = bytearray(value)
        self._destroyed = False

    @classmethod
    def from_entropy(cls, entropy: bytes, version_type: VersionType) -> Seed:
        """
        Create a seed from 16 bytes of entropy.

        Raises:
            EncodeError: If entropy is not 16 bytes
        """
        encoded = AddressCodec.encode_seed(bytes(entropy), version_type)
        return cls(AddressBase58.decode_raw(encoded))

    @classmethod
    def from_passphrase(cls, passphrase: Passphrase, version_type: VersionType) -> Seed:
        """Derive a seed deterministically from the first 16 bytes of SHA512(passphrase)."""
        return cls.from_entropy(_entropy_from_passphrase(passphrase), version_type)

    @classmethod
    def ed25519_seed_from_entropy(cls, entropy: bytes) -> Seed:
        return cls.from_entropy(entropy, VersionType.ED25519)

    @classmethod
    def secp256k1_seed_from_entropy(cls, entropy: bytes) -> Seed:
        return cls.from_entropy(entropy, VersionType.SECP256K1)

    @classmethod
    def ed25519_seed_from_passphrase(cls, passphrase: Passphrase) -> Seed:
        return cls.from_passphrase(passphrase, VersionType.ED25519)

    @classmethod
    def secp256k1_seed_from_passphrase(cls, passphrase: Passphrase) -> Seed:
        return cls.from_passphrase(passphrase, VersionType.SECP256K1)

    def decoded_seed(self) -> Decoded:
        """
        Decode the seed to its entropy and key algorithm.

        Raises:
            SeedDestroyedError: If the seed has been destroyed
        """
        if self._destroyed:
            raise SeedDestroyedError()
        return AddressCodec.decode_seed(AddressBase58.encode_raw(bytes(self._value)))

    def to_base58(self) -> str:
        """
        Seed string form ("sEd..." or "s...").

        Raises:
            SeedDestroyedError: If the seed has been destroyed
        """
        if self._destroyed:
            raise SeedDestroyedError()
        return AddressBase58.encode_raw(bytes(self._value))

    def destroy(self) -> None:
        """Zero the seed bytes in place and mark the seed destroyed."""
        for i in range(len(self._value)):
            self._value[i] = 0
        self._destroyed = True

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def __enter__(self) -> Seed:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def __del__(self):
        # zero the bytes when the seed is garbage collected
        if hasattr(self, "_value"):
            self.destroy()

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Seed):
            return False
        return bytes(self._value) == bytes(other._value)

    def __hash__(self) -> int:
        return hash(bytes(self._value))

    def __repr__(self) -> str:
        return f"Seed(value=[redacted], destroyed={self._destroyed})"
