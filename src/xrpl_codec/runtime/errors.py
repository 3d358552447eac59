"""
XRPL Codec Error Model

This module provides the error handling framework for the codec. Every failure
is raised synchronously to the caller of the failing operation; nothing is
retried internally.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Codec error codes."""

    # General errors (1-99)
    UNKNOWN = 1
    INVALID_ARGUMENT = 2

    # Binary codec errors (100-199)
    MALFORMED_INPUT = 100
    TRUNCATED_INPUT = 101
    INVALID_ENCODING = 102
    UNKNOWN_FIELD = 103

    # Address codec errors (200-299)
    ENCODE_ERROR = 200
    DECODE_ERROR = 201
    INVALID_PREFIX = 202
    UNSUPPORTED_64BIT_TAG = 203
    NON_ZERO_TAG_BYTES_WITH_NO_TAG = 204

    # Key material errors (300-399)
    SEED_DESTROYED = 300


class XRPLCodecError(Exception):
    """
    Base class for all codec errors.

    Carries a structured code, optional details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a codec error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'XRPLCodecError':
        """Create error from dictionary representation."""
        code = ErrorCode(data.get("code", ErrorCode.UNKNOWN))
        message = data.get("message", "Unknown error")
        details = data.get("details")
        return cls(message, code, details)


class InvalidArgumentError(XRPLCodecError):
    """Caller misuse, such as a non-object payload for multi-signing."""

    def __init__(self, message: str = "Invalid argument",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ARGUMENT, details, cause)


class BinaryCodecError(XRPLCodecError):
    """Binary encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_ENCODING,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class MalformedInputError(BinaryCodecError):
    """JSON value does not have the shape its type expects."""

    def __init__(self, message: str = "Malformed input",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MALFORMED_INPUT, details, cause)


class TruncatedInputError(BinaryCodecError):
    """Buffer underrun while decoding."""

    def __init__(self, message: str = "Truncated input",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.TRUNCATED_INPUT, details, cause)


class InvalidEncodingError(BinaryCodecError):
    """Length prefix or discriminant out of the legal range."""

    def __init__(self, message: str = "Invalid encoding",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ENCODING, details, cause)


class UnknownFieldError(BinaryCodecError):
    """Field name or field header resolves to no registry entry."""

    def __init__(self, message: str = "Unknown field",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNKNOWN_FIELD, details, cause)


class EncodeError(XRPLCodecError):
    """Address or seed payload cannot be encoded."""

    def __init__(self, message: str = "Encode error",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.ENCODE_ERROR, details, cause)


class DecodeError(XRPLCodecError):
    """Address or seed string cannot be decoded (alphabet, checksum, version or length)."""

    def __init__(self, message: str = "Decode error", code: ErrorCode = ErrorCode.DECODE_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class InvalidPrefixError(DecodeError):
    """X-Address network prefix is neither main nor test."""

    def __init__(self, message: str = "Invalid X-Address: Bad Prefix",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_PREFIX, details, cause)


class Unsupported64BitTagError(DecodeError):
    """X-Address flag byte announces a 64-bit tag."""

    def __init__(self, message: str = "Unsupported X-Address: 64-bit tags are not supported",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNSUPPORTED_64BIT_TAG, details, cause)


class NonZeroTagBytesWithNoTagError(DecodeError):
    """X-Address without a tag carries non-zero tag bytes."""

    def __init__(self, message: str = "Tag bytes in X-Address must be 0 if the address has no tag",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.NON_ZERO_TAG_BYTES_WITH_NO_TAG, details, cause)


class SeedDestroyedError(XRPLCodecError):
    """Seed material was read after destroy()."""

    def __init__(self, message: str = "Seed has been destroyed",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.SEED_DESTROYED, details, cause)


def error_from_dict(data: Dict[str, Any]) -> XRPLCodecError:
    """
    Create the most specific error from its dictionary representation.

    Args:
        data: Dictionary produced by XRPLCodecError.to_dict()

    Returns:
        Appropriate error instance
    """
    message = data.get("message", "Unknown error")
    code_value = data.get("code", ErrorCode.UNKNOWN)
    details = data.get("details")

    try:
        code = ErrorCode(code_value)
    except ValueError:
        code = ErrorCode.UNKNOWN

    if code == ErrorCode.INVALID_ARGUMENT:
        return InvalidArgumentError(message, details)
    elif code == ErrorCode.MALFORMED_INPUT:
        return MalformedInputError(message, details)
    elif code == ErrorCode.TRUNCATED_INPUT:
        return TruncatedInputError(message, details)
    elif code == ErrorCode.INVALID_ENCODING:
        return InvalidEncodingError(message, details)
    elif code == ErrorCode.UNKNOWN_FIELD:
        return UnknownFieldError(message, details)
    elif code == ErrorCode.ENCODE_ERROR:
        return EncodeError(message, details)
    elif code == ErrorCode.DECODE_ERROR:
        return DecodeError(message, details=details)
    elif code == ErrorCode.INVALID_PREFIX:
        return InvalidPrefixError(message, details)
    elif code == ErrorCode.UNSUPPORTED_64BIT_TAG:
        return Unsupported64BitTagError(message, details)
    elif code == ErrorCode.NON_ZERO_TAG_BYTES_WITH_NO_TAG:
        return NonZeroTagBytesWithNoTagError(message, details)
    elif code == ErrorCode.SEED_DESTROYED:
        return SeedDestroyedError(message, details)
    else:
        return XRPLCodecError(message, code, details)


__all__ = [
    "ErrorCode",
    "XRPLCodecError",
    "InvalidArgumentError",
    "BinaryCodecError",
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
    "error_from_dict",
]
