"""Runtime helpers for the XRPL codec"""

from .errors import (
    ErrorCode,
    XRPLCodecError,
    MalformedInputError,
    TruncatedInputError,
    InvalidEncodingError,
    UnknownFieldError,
    EncodeError,
    DecodeError,
)

__all__ = [
    "ErrorCode",
    "XRPLCodecError",
    "MalformedInputError",
    "TruncatedInputError",
    "InvalidEncodingError",
    "UnknownFieldError",
    "EncodeError",
    "DecodeError",
]
