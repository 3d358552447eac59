"""
Error model tests.
"""

import pytest

from xrpl_codec.runtime.errors import (
    BinaryCodecError,
    DecodeError,
    ErrorCode,
    InvalidArgumentError,
    InvalidPrefixError,
    MalformedInputError,
    SeedDestroyedError,
    TruncatedInputError,
    Unsupported64BitTagError,
    XRPLCodecError,
    error_from_dict,
)


@pytest.mark.unit
class TestErrorModel:
    """Test error codes, hierarchy and serialization."""

    def test_hierarchy(self):
        """Test that every error derives from the codec base error."""
        assert issubclass(MalformedInputError, BinaryCodecError)
        assert issubclass(InvalidPrefixError, DecodeError)
        assert issubclass(Unsupported64BitTagError, DecodeError)
        for error_cls in (InvalidArgumentError, TruncatedInputError, SeedDestroyedError, DecodeError):
            assert issubclass(error_cls, XRPLCodecError)

    def test_default_codes(self):
        """Test that subclasses carry their own code."""
        assert MalformedInputError().code == ErrorCode.MALFORMED_INPUT
        assert TruncatedInputError().code == ErrorCode.TRUNCATED_INPUT
        assert InvalidPrefixError().code == ErrorCode.INVALID_PREFIX
        assert DecodeError().code == ErrorCode.DECODE_ERROR

    def test_str_includes_code_and_details(self):
        """Test the string form."""
        cause = ValueError("boom")
        error = MalformedInputError("bad value", details={"field": "Fee"}, cause=cause)
        text = str(error)
        assert "[MALFORMED_INPUT] bad value" in text
        assert "Fee" in text
        assert "boom" in text

    def test_to_dict(self):
        """Test the dictionary form."""
        error = TruncatedInputError("short", details={"offset": 3})
        assert error.to_dict() == {
            "code": ErrorCode.TRUNCATED_INPUT.value,
            "message": "short",
            "details": {"offset": 3},
        }

    @pytest.mark.parametrize("error", [
        MalformedInputError("m"),
        InvalidPrefixError(),
        Unsupported64BitTagError(),
        SeedDestroyedError(),
        DecodeError("d", details={"encoded": "x"}),
    ])
    def test_from_dict_restores_class(self, error):
        """Test that error_from_dict rebuilds the specific error class."""
        restored = error_from_dict(error.to_dict())
        assert type(restored) is type(error)
        assert restored.code == error.code
        assert restored.message == error.message

    def test_from_dict_unknown_code(self):
        """Test that an unknown code falls back to the base error."""
        restored = error_from_dict({"code": 9999, "message": "strange"})
        assert type(restored) is XRPLCodecError
        assert restored.code == ErrorCode.UNKNOWN

    def test_base_from_dict(self):
        """Test the classmethod on the base error."""
        restored = XRPLCodecError.from_dict({"code": 102, "message": "x"})
        assert restored.code == ErrorCode.INVALID_ENCODING
