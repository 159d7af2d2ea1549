# bindecimal

A small library for a decimal number stored in four 32-bit words: a 96-bit
unsigned mantissa (three words, low word first), and a flags word holding a
power-of-ten scale from 0 to 28 in bits 16-23 and the sign in bit 31.

It provides the value type, rounding and sign functions, and conversions to
and from Python `int` and `float`.

## Installation

```
pip install .
```

## The value type

`bindecimal.value.BinaryDecimal` is a frozen dataclass holding the four words
in `bits`. Build one from raw words or from its parts:

```python
from bindecimal.value import BinaryDecimal

# 5.0: mantissa 50, scale 1
five = BinaryDecimal.from_parts(50, 1, False)
raw = BinaryDecimal.from_bits((50, 0, 0, 1 << 16))
assert five == raw

five.mantissa      # 50
five.scale         # 1
five.negative      # False
five.flags         # the fourth word

five.is_valid()    # True: scale at most 28 and unused flag bits clear
five.is_zero()     # False
minus_five = five.with_sign(True)
wide = five.widen()
```

`from_bits` accepts signed words too; every word is read as 32 bits.
`from_parts` takes `mantissa`, `scale` (default 0) and `negative` (default
`False`) and raises `DecimalError` when the mantissa does not fit in 96 bits
or the scale is outside 0..28.

`bindecimal.value.BigDecimal` is an eight-word form: seven mantissa words and
the flags word last. `BigDecimal.zero()` gives an all-zero value and
`BigDecimal.from_decimal(value)` (or `value.widen()`) copies a
`BinaryDecimal` into it. It exposes `mantissa` and `flags`.

## Rounding and sign functions

`bindecimal.functions` takes a `BinaryDecimal` and returns a new one:

```python
from bindecimal.functions import truncate, floor, negate, round_half_away

value = BinaryDecimal.from_parts(24363463, 7, True)   # -2.4363463
truncate(value)         # -2: fractional digits dropped
floor(value)            # -3: towards negative infinity
round_half_away(value)  # -2: decided by the first fractional digit
negate(value)           # 2.4363463: only the sign bit flips
```

`truncate`, `floor` and `round_half_away` return a value with scale 0 and keep
the input's sign bit, so rounding -0.45 gives a zero with the sign bit set.
`round_half_away` returns a scale-0 input unchanged. An invalid input raises
`bindecimal.value.FunctionError`.

## Conversions

`bindecimal.conversion` moves values between Python numbers and
`BinaryDecimal`:

```python
from bindecimal.conversion import from_int, from_float, to_int, to_float

from_int(-12345)      # sign bit set, mantissa 12345, scale 0
from_float(1.00001)   # mantissa 100001, scale 5
to_int(value)         # -2, truncated towards zero
to_float(value)       # about -2.4363463, rounded to single precision
```

- `from_int` accepts integers in the signed 32-bit range (`INT_MIN` to
  `INT_MAX`) and raises `ConversionError` outside it.
- `from_float` first rounds its argument to single precision and keeps about
  seven significant digits, dropping trailing zeros. Infinity and NaN raise
  `ConversionError`; zero, and magnitudes whose binary exponent lies outside
  (-94, 96), give a zero decimal.
- `to_int` raises `ConversionError` for an invalid decimal or when the
  truncated value does not fit in 32 bits.
- `to_float` returns a Python `float` rounded to single precision; a zero keeps
  its sign. An invalid decimal raises `ConversionError`.

`ConversionError` and `FunctionError` both derive from
`bindecimal.value.DecimalError`, which is a `ValueError`.

## What it does not do

There is no arithmetic (addition, subtraction, multiplication, division) and
no comparison between `BinaryDecimal` values, and `BigDecimal` is only a
holder with no operations of its own. The package offers no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```