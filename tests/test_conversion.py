import math
import struct

import pytest

from bindecimal.conversion import from_float, from_int, to_float, to_int
from bindecimal.value import BinaryDecimal, ConversionError

SIGN = 0b10000000000000000000000000000000


def _float32(value):
    return struct.unpack("<f", struct.pack("<f", value))[0]


@pytest.mark.parametrize(
    "source, bits",
    [
        (1, (0b1, 0, 0, 0)),
        (0, (0, 0, 0, 0)),
        (-1, (0b1, 0, 0, SIGN)),
        (2147483647, (0b01111111111111111111111111111111, 0, 0, 0)),
        (-2147483647, (0b01111111111111111111111111111111, 0, 0, SIGN)),
        (-12345, (0b00000000000000000011000000111001, 0, 0, SIGN)),
        (45678, (0b00000000000000001011001001101110, 0, 0, 0)),
        (-45678, (0b00000000000000001011001001101110, 0, 0, SIGN)),
        (5555555, (0b00000000010101001100010101100011, 0, 0, 0)),
        (-5555555, (0b00000000010101001100010101100011, 0, 0, SIGN)),
        (127, (0b00000000000000000000000001111111, 0, 0, 0)),
        (-127, (0b00000000000000000000000001111111, 0, 0, SIGN)),
        (34567898, (0b00000010000011110111011011011010, 0, 0, 0)),
        (-34567898, (0b00000010000011110111011011011010, 0, 0, SIGN)),
        (999, (0b00000000000000000000001111100111, 0, 0, 0)),
        (-999, (0b00000000000000000000001111100111, 0, 0, SIGN)),
        (-3254754, (0b00000000001100011010100111100010, 0, 0, SIGN)),
        (3436425, (0b00000000001101000110111110001001, 0, 0, 0)),
        (222222222, (0b00001101001111101101011110001110, 0, 0, 0)),
    ],
)
def test_from_int(source, bits):
    assert from_int(source).bits == bits


def test_from_int_minimum():
    result = from_int(-(2**31))
    assert result.bits == (0x80000000, 0, 0, SIGN)


@pytest.mark.parametrize("source", [2**31, -(2**31) - 1, 10**12])
def test_from_int_out_of_range(source):
    with pytest.raises(ConversionError):
        from_int(source)


@pytest.mark.parametrize("source", [0, 1, -1, 2147483647, -2147483648, 123456, -98765])
def test_int_round_trip(source):
    assert to_int(from_int(source)) == source


def test_from_float_small_fraction():
    result = from_float(1.00001)
    assert result.bits == (0b11000011010100001, 0, 0, 5 << 16)


@pytest.mark.parametrize("source", [math.inf, -math.inf, math.nan, 1e300])
def test_from_float_rejects_non_finite(source):
    with pytest.raises(ConversionError):
        from_float(source)


def test_from_float_half():
    assert from_float(0.5).bits == (5, 0, 0, 1 << 16)


def test_from_float_negative():
    result = from_float(-2.5)
    assert result.bits == (25, 0, 0, SIGN | (1 << 16))


def test_from_float_integer_drops_scale():
    assert from_float(100.0).bits == (100, 0, 0, 0)


def test_from_float_zero():
    assert from_float(0.0).bits == (0, 0, 0, 0)
    assert from_float(-0.0).bits == (0, 0, 0, 0)


def test_from_float_large_power_of_two():
    result = from_float(2.0**70)
    assert result.mantissa == 2**70
    assert result.scale == 0
    assert not result.negative


def test_from_float_tiny_is_zero():
    assert from_float(1e-30).bits == (0, 0, 0, 0)


@pytest.mark.parametrize("source", [1.5, -3.25, 0.125, 12345.0, -0.75, 2.0**40])
def test_float_round_trip(source):
    assert to_float(from_float(source)) == _float32(source)


def test_to_float_with_scale():
    assert to_float(BinaryDecimal.from_parts(15, 1)) == 1.5


def test_to_float_negative():
    assert to_float(BinaryDecimal.from_parts(325, 2, True)) == -3.25


def test_to_float_zero():
    assert to_float(BinaryDecimal.from_parts(0, 3)) == 0.0
    assert math.copysign(1.0, to_float(BinaryDecimal.from_parts(0, 0, True))) == -1.0


def test_to_float_maximum():
    value = BinaryDecimal.from_bits((0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0))
    assert to_float(value) == _float32(float(2**96))


def test_to_float_invalid():
    with pytest.raises(ConversionError):
        to_float(BinaryDecimal.from_bits((1, 0, 0, 1)))


def test_to_int_truncates():
    assert to_int(BinaryDecimal.from_parts(12345, 2)) == 123
    assert to_int(BinaryDecimal.from_parts(12399, 2, True)) == -123


def test_to_int_fraction_only():
    assert to_int(BinaryDecimal.from_parts(9, 1, True)) == 0


def test_to_int_limits():
    assert to_int(BinaryDecimal.from_parts(2**31, 0, True)) == -(2**31)
    assert to_int(BinaryDecimal.from_parts(2**31 - 1)) == 2**31 - 1


def test_to_int_out_of_range():
    with pytest.raises(ConversionError):
        to_int(BinaryDecimal.from_parts(2**31))
    with pytest.raises(ConversionError):
        to_int(BinaryDecimal.from_parts(2**31 + 1, 0, True))


def test_to_int_invalid():
    with pytest.raises(ConversionError):
        to_int(BinaryDecimal.from_bits((1, 0, 0, 29 << 16)))