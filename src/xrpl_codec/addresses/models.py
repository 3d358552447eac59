"""
Address codec data types.

Version prefixes, seed key algorithms and the result records returned by the
address codec.
"""

from __future__ import annotations
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class VersionType(str, Enum):
    """Key algorithm encoded in a seed's version prefix."""
    ED25519 = "ed25519"
    SECP256K1 = "secp256k1"


class Version(Enum):
    """Version prefixes of checksum-encoded payloads."""
    ACCOUNT_ID = b"\x00"
    NODE_PUBLIC = b"\x1c"
    FAMILY_SEED = b"\x21"
    ACCOUNT_PUBLIC_KEY = b"\x23"
    ED25519_SEED = b"\x01\xe1\x4b"

    @property
    def prefix(self) -> bytes:
        return self.value


class Decoded(BaseModel):
    """
    Result of decoding a checksum-encoded string.

    For seeds, version_type names the key algorithm implied by the version.
    """
    payload: bytes = Field(description="Decoded payload without version or checksum")
    version: Version = Field(description="Version prefix that matched")
    version_type: Optional[VersionType] = Field(default=None, description="Seed key algorithm")

    model_config = {"frozen": True}


class ClassicAddress(BaseModel):
    """Classic address plus the tag and network carried by an X-Address."""
    classic_address: str = Field(alias="classicAddress")
    tag: Optional[int] = Field(default=None, ge=0, le=0xFFFFFFFF)
    test: bool = False

    model_config = {"populate_by_name": True, "frozen": True}


class DecodedXAddress(BaseModel):
    """Raw fields of an X-Address."""
    account_id: bytes = Field(alias="accountId", min_length=20, max_length=20)
    tag: Optional[int] = Field(default=None, ge=0, le=0xFFFFFFFF)
    test: bool = False

    model_config = {"populate_by_name": True, "frozen": True}
