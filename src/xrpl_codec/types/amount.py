"""
Amount: native XRP drops (8 bytes) or an issued-currency amount (48 bytes).

Bit 63 of the first 8 bytes is 0 for native amounts and 1 for issued ones.
Bit 62 is the sign bit (1 = positive).

Native:  62-bit drop count.
Issued:  8-bit biased exponent and 54-bit mantissa, then the 20-byte currency
         code and the 20-byte issuer account id. Zero is the reserved value
         0x8000000000000000 regardless of exponent.
"""

from __future__ import annotations
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from ..definitions.registry import Definitions
from ..runtime.errors import MalformedInputError
from .account_id import AccountID
from .base import SerializedType
from .currency import Currency

NOT_XRP_BIT_MASK = 0x8000000000000000
POS_SIGN_BIT_MASK = 0x4000000000000000
DROPS_MASK = 0x3FFFFFFFFFFFFFFF
ZERO_CURRENCY_AMOUNT = NOT_XRP_BIT_MASK

MAX_DROPS = 10 ** 17

MIN_IOU_EXPONENT = -96
MAX_IOU_EXPONENT = 80
MAX_IOU_PRECISION = 16
MIN_MANTISSA = 10 ** 15
MAX_MANTISSA = 10 ** 16 - 1
EXPONENT_BIAS = 97

NATIVE_AMOUNT_LENGTH = 8
ISSUED_AMOUNT_LENGTH = 48

_DROPS_REGEX = re.compile(r"^[0-9]+$")


def _serialize_native(value: str) -> bytes:
    if not _DROPS_REGEX.match(value):
        raise MalformedInputError(f"XRP amount must be a string of drops: {value!r}")
    drops = int(value)
    if drops > MAX_DROPS:
        raise MalformedInputError(
            f"XRP amount exceeds {MAX_DROPS} drops: {value}",
            details={"value": value},
        )
    return (drops | POS_SIGN_BIT_MASK).to_bytes(NATIVE_AMOUNT_LENGTH, byteorder="big")


def _serialize_issued_value(value: Any) -> bytes:
    if not isinstance(value, str):
        raise MalformedInputError(f"Issued amount value must be a string: {value!r}")
    try:
        decimal_value = Decimal(value)
    except InvalidOperation as e:
        raise MalformedInputError(f"Invalid issued amount value: {value!r}", cause=e)
    if not decimal_value.is_finite():
        raise MalformedInputError(f"Issued amount value must be finite: {value!r}")
    if decimal_value.is_zero():
        return ZERO_CURRENCY_AMOUNT.to_bytes(8, byteorder="big")

    sign, digits, exponent = decimal_value.as_tuple()
    significant = "".join(str(d) for d in digits).rstrip("0") or "0"
    if len(significant) > MAX_IOU_PRECISION:
        raise MalformedInputError(
            f"Issued amount value exceeds {MAX_IOU_PRECISION} significant digits: {value}",
            details={"value": value},
        )

    mantissa = int("".join(str(d) for d in digits))
    while mantissa < MIN_MANTISSA and exponent > MIN_IOU_EXPONENT:
        mantissa *= 10
        exponent -= 1
    while mantissa > MAX_MANTISSA:
        if exponent >= MAX_IOU_EXPONENT:
            raise MalformedInputError(f"Issued amount value overflows: {value}")
        mantissa //= 10
        exponent += 1

    if exponent < MIN_IOU_EXPONENT or mantissa < MIN_MANTISSA:
        # Too small to represent; rounds to zero
        return ZERO_CURRENCY_AMOUNT.to_bytes(8, byteorder="big")
    if exponent > MAX_IOU_EXPONENT:
        raise MalformedInputError(f"Issued amount value overflows: {value}")

    serial = NOT_XRP_BIT_MASK
    if sign == 0:
        serial |= POS_SIGN_BIT_MASK
    serial |= (exponent + EXPONENT_BIAS) << 54
    serial |= mantissa
    return serial.to_bytes(8, byteorder="big")


def _format_issued_value(raw: bytes) -> str:
    serial = int.from_bytes(raw, byteorder="big")
    mantissa = serial & ((1 << 54) - 1)
    if mantissa == 0:
        return "0"
    exponent = ((serial >> 54) & 0xFF) - EXPONENT_BIAS
    value = Decimal(mantissa).scaleb(exponent).normalize()
    if not serial & POS_SIGN_BIT_MASK:
        value = -value
    if -20 <= value.adjusted() <= 20:
        return format(value, "f")
    return str(value)


class Amount(SerializedType):
    """Native or issued-currency amount."""

    @classmethod
    def from_value(cls, value: Any, definitions: Optional[Definitions] = None) -> Amount:
        if isinstance(value, str):
            return cls(_serialize_native(value))
        if isinstance(value, dict):
            missing = {"currency", "issuer", "value"} - set(value)
            if missing:
                raise MalformedInputError(
                    f"Issued amount is missing {sorted(missing)}",
                    details={"missing": sorted(missing)},
                )
            return cls(
                _serialize_issued_value(value["value"])
                + Currency.from_value(value["currency"]).to_bytes()
                + AccountID.from_value(value["issuer"]).to_bytes()
            )
        raise MalformedInputError(
            f"Amount must be a string of drops or an issued amount object, got {type(value).__name__}"
        )

    @classmethod
    def from_parser(cls, reader, length_hint: Optional[int] = None) -> Amount:
        length = ISSUED_AMOUNT_LENGTH if reader.peek() & 0x80 else NATIVE_AMOUNT_LENGTH
        return cls(reader.bytes(length))

    @property
    def is_native(self) -> bool:
        return not self._buffer[0] & 0x80

    def to_json(self) -> Any:
        if self.is_native:
            serial = int.from_bytes(self._buffer, byteorder="big")
            drops = serial & DROPS_MASK
            if drops and not serial & POS_SIGN_BIT_MASK:
                return f"-{drops}"
            return str(drops)

        result: Dict[str, Any] = {
            "currency": Currency(self._buffer[8:28]).to_json(),
            "issuer": AccountID(self._buffer[28:48]).to_json(),
            "value": _format_issued_value(self._buffer[:8]),
        }
        return result
