"""Rounding and sign functions on binary decimals."""

from __future__ import annotations

from .value import BinaryDecimal, FunctionError


def _require_valid(value: BinaryDecimal, name: str) -> None:
    if not value.is_valid():
        raise FunctionError(f"{name}: invalid decimal {value.bits}")


def truncate(value: BinaryDecimal) -> BinaryDecimal:
    """Drop the fractional digits, keeping the sign."""
    _require_valid(value, "truncate")
    whole = value.mantissa // 10**value.scale
    return BinaryDecimal.from_parts(whole, 0, value.negative)


def floor(value: BinaryDecimal) -> BinaryDecimal:
    """Round towards negative infinity, keeping the sign."""
    _require_valid(value, "floor")
    whole, fraction = divmod(value.mantissa, 10**value.scale)
    if value.negative and fraction:
        whole += 1
    return BinaryDecimal.from_parts(whole, 0, value.negative)


def negate(value: BinaryDecimal) -> BinaryDecimal:
    """Flip the sign, leaving mantissa and scale untouched."""
    _require_valid(value, "negate")
    return value.with_sign(not value.negative)


def round_half_away(value: BinaryDecimal) -> BinaryDecimal:
    """Round to an integer by the first fractional digit, halves away from zero."""
    _require_valid(value, "round")
    scale = value.scale
    if not scale:
        return value
    whole, fraction = divmod(value.mantissa, 10**scale)
    if fraction // 10 ** (scale - 1) >= 5:
        whole += 1
    return BinaryDecimal.from_parts(whole, 0, value.negative)