"""
Hash utility tests.
"""

import hashlib

import pytest

from xrpl_codec.crypto import checksum, double_sha256, sha512_half


@pytest.mark.unit
class TestHashUtils:
    """Test hash helpers against hashlib."""

    def test_double_sha256(self):
        """Test SHA256 applied twice."""
        data = b"xrpl"
        expected = hashlib.sha256(hashlib.sha256(data).digest()).digest()
        assert double_sha256(data) == expected

    def test_checksum_is_four_bytes(self):
        """Test that the checksum is the double SHA256 prefix."""
        assert checksum(b"\x00" * 21) == double_sha256(b"\x00" * 21)[:4]
        assert len(checksum(b"")) == 4

    def test_sha512_half(self):
        """Test the first half of SHA512."""
        data = b"ledger"
        assert sha512_half(data) == hashlib.sha512(data).digest()[:32]
        assert len(sha512_half(data)) == 32

    def test_rejects_non_bytes(self):
        """Test that text input is rejected."""
        with pytest.raises(ValueError):
            double_sha256("text")
        with pytest.raises(ValueError):
            sha512_half("text")
