"""Conversions between binary decimals and Python ints and floats."""

from __future__ import annotations

import math
import operator
import struct

from .functions import truncate
from .value import MAX_SCALE, BinaryDecimal, ConversionError, FunctionError

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_MIN_SCALE = 0
_NORMALISE_LIMIT = 1 << 21
_MIN_BINARY_EXPONENT = -94
_MAX_BINARY_EXPONENT = 96


def _to_float32(value: float) -> float:
    """Round a Python float to single precision; overflow becomes infinity."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _binary_exponent(value: float) -> int:
    """The unbiased base-two exponent of a non-zero finite float."""
    return math.frexp(value)[1] - 1


def _round_half_away(value: float) -> float:
    """Round a non-negative float to an integer, halves away from zero."""
    whole = math.floor(value)
    return whole + 1.0 if value - whole >= 0.5 else float(whole)


def from_int(value: int) -> BinaryDecimal:
    """Convert a 32-bit signed integer to a decimal with scale zero."""
    number = operator.index(value)
    if not INT_MIN <= number <= INT_MAX:
        raise ConversionError(f"integer out of 32-bit range: {number}")
    return BinaryDecimal.from_parts(abs(number), 0, number < 0)


def to_int(value: BinaryDecimal) -> int:
    """Truncate a decimal towards zero and return it as a 32-bit integer."""
    try:
        whole = truncate(value)
    except FunctionError as error:
        raise ConversionError(f"cannot convert invalid decimal {value.bits}") from error
    result = -whole.mantissa if whole.negative else whole.mantissa
    if not INT_MIN <= result <= INT_MAX:
        raise ConversionError(f"decimal does not fit in 32 bits: {result}")
    return result


def to_float(value: BinaryDecimal) -> float:
    """Convert a decimal to the nearest single-precision value, as a float."""
    if not value.is_valid():
        raise ConversionError(f"cannot convert invalid decimal {value.bits}")
    if value.is_zero():
        return -0.0 if value.negative else 0.0
    mantissa = value.mantissa
    total = 0.0
    for position in range(mantissa.bit_length()):
        if mantissa >> position & 1:
            total += 2.0**position
    total /= 10.0**value.scale
    if value.negative:
        total = -total
    return _to_float32(total)


def from_float(value: float) -> BinaryDecimal:
    """Convert a float, first rounded to single precision, to a decimal.

    About seven significant digits are kept and trailing zeros are dropped.
    Magnitudes whose binary exponent lies outside (-94, 96) give zero.
    Infinities and NaN raise ConversionError.
    """
    single = _to_float32(float(value))
    if math.isinf(single) or math.isnan(single):
        raise ConversionError(f"cannot convert {single!r} to a decimal")
    if single == 0:
        return BinaryDecimal()

    negative = single < 0
    exponent = _binary_exponent(single)
    temp = abs(single)
    scale = _MIN_SCALE
    while scale < MAX_SCALE and int(temp) < _NORMALISE_LIMIT:
        temp *= 10
        scale += 1
    temp = _round_half_away(temp)

    if not _MIN_BINARY_EXPONENT < exponent < _MAX_BINARY_EXPONENT:
        return BinaryDecimal()

    temp = _to_float32(temp)
    while math.fmod(temp, 10) == 0 and scale > _MIN_SCALE:
        temp /= 10
        scale -= 1
    mantissa = int(_to_float32(temp))
    return BinaryDecimal.from_parts(mantissa, scale, negative)