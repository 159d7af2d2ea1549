"""The 128-bit binary decimal value and its widened working form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

WORD_MASK = 0xFFFFFFFF
MAX_MANTISSA = (1 << 96) - 1
MAX_SCALE = 28

_SIGN_BIT = 1 << 31
_SCALE_SHIFT = 16
_SCALE_MASK = 0xFF << _SCALE_SHIFT
_DECIMAL_WORDS = 4
_BIG_WORDS = 8


class DecimalError(ValueError):
    """Base class for errors raised by this package."""


class ConversionError(DecimalError):
    """A value cannot be converted to or from a decimal."""


class FunctionError(DecimalError):
    """A math function was given a value it cannot work on."""


def _normalise_words(words: Iterable[int], count: int) -> tuple[int, ...]:
    result = tuple(int(word) & WORD_MASK for word in words)
    if len(result) != count:
        raise DecimalError(f"expected {count} words, got {len(result)}")
    return result


@dataclass(frozen=True)
class BinaryDecimal:
    """A decimal held as a 96-bit mantissa, a power-of-ten scale and a sign.

    ``bits`` holds four unsigned 32-bit words: three for the mantissa, low
    word first, and one for flags (scale in bits 16-23, sign in bit 31).
    """

    bits: tuple[int, int, int, int] = (0, 0, 0, 0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bits", _normalise_words(self.bits, _DECIMAL_WORDS))

    @classmethod
    def from_bits(cls, bits: Iterable[int]) -> BinaryDecimal:
        """Build a decimal from four words; signed words are read as 32-bit."""
        return cls(tuple(bits))

    @classmethod
    def from_parts(cls, mantissa: int, scale: int = 0, negative: bool = False) -> BinaryDecimal:
        """Build a decimal from its mantissa, scale and sign."""
        if not 0 <= mantissa <= MAX_MANTISSA:
            raise DecimalError(f"mantissa out of range: {mantissa}")
        if not 0 <= scale <= MAX_SCALE:
            raise DecimalError(f"scale out of range: {scale}")
        low, mid, high = ((mantissa >> (32 * shift)) & WORD_MASK for shift in range(3))
        flags = (scale << _SCALE_SHIFT) | (_SIGN_BIT if negative else 0)
        return cls((low, mid, high, flags))

    @property
    def flags(self) -> int:
        return self.bits[3]

    @property
    def mantissa(self) -> int:
        low, mid, high, _ = self.bits
        return low | (mid << 32) | (high << 64)

    @property
    def scale(self) -> int:
        return (self.flags & _SCALE_MASK) >> _SCALE_SHIFT

    @property
    def negative(self) -> bool:
        return bool(self.flags & _SIGN_BIT)

    def is_valid(self) -> bool:
        """True when unused flag bits are clear and the scale is at most 28."""
        unused = self.flags & ~(_SIGN_BIT | _SCALE_MASK) & WORD_MASK
        return unused == 0 and self.scale <= MAX_SCALE

    def is_zero(self) -> bool:
        return self.mantissa == 0

    def with_sign(self, negative: bool) -> BinaryDecimal:
        """Return a copy with the sign bit set or cleared."""
        flags = self.flags | _SIGN_BIT if negative else self.flags & ~_SIGN_BIT
        return BinaryDecimal(self.bits[:3] + (flags & WORD_MASK,))

    def widen(self) -> BigDecimal:
        return BigDecimal.from_decimal(self)


@dataclass(frozen=True)
class BigDecimal:
    """An eight-word working form: seven mantissa words and the flags word."""

    bits: tuple[int, ...] = (0,) * _BIG_WORDS

    def __post_init__(self) -> None:
        object.__setattr__(self, "bits", _normalise_words(self.bits, _BIG_WORDS))

    @classmethod
    def zero(cls) -> BigDecimal:
        return cls()

    @classmethod
    def from_decimal(cls, value: BinaryDecimal) -> BigDecimal:
        """Copy the mantissa words into the low words and the flags to the last."""
        low, mid, high, flags = value.bits
        return cls((low, mid, high, 0, 0, 0, 0, flags))

    @property
    def mantissa(self) -> int:
        return sum(word << (32 * shift) for shift, word in enumerate(self.bits[:-1]))

    @property
    def flags(self) -> int:
        return self.bits[-1]