"""A 96-bit binary decimal type with rounding, sign and conversion functions."""

__version__ = "0.1.0"
__all__ = ["value", "functions", "conversion"]