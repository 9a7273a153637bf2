"""
Display formatting for conversion results.

Values are shown positionally with up to 8 significant digits; very small
and very large magnitudes switch to scientific notation.
"""

import math
from collections.abc import Mapping

import numpy as np

INFINITY_SYMBOL = "∞"

# Shown instead of a value derived from an out-of-range size input
OUT_OF_RANGE_SYMBOL = "—"

# Magnitudes outside [SCI_SMALL, SCI_LARGE] use scientific notation
SCI_SMALL = 1e-6
SCI_LARGE = 1e9
SCI_DECIMALS = 6
SIGNIFICANT_DIGITS = 8


def _scientific(value: float) -> str:
    # Exponent without zero padding: 1.000000e-9, 1.500000e+10
    mantissa, exponent = f"{value:.{SCI_DECIMALS}e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"


def format_number(value: float) -> str:
    """
    Format a conversion result for display.

    Args:
        value: Converted value

    Returns:
        "∞" for ±infinity, scientific notation with 6 mantissa decimals for
        0 < |value| < 1e-6 or |value| > 1e9, else up to 8 significant
        digits without trailing zeros

    Example:
        >>> format_number(3.0)
        '3'
        >>> format_number(1 / 3)
        '0.33333333'
        >>> format_number(1e-9)
        '1.000000e-9'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return INFINITY_SYMBOL
    if value == 0:
        return "0"

    magnitude = abs(value)
    if magnitude < SCI_SMALL or magnitude > SCI_LARGE:
        return _scientific(value)

    rounded = float(f"{value:.{SIGNIFICANT_DIGITS}g}")
    return np.format_float_positional(rounded, trim='-')


def format_conversions(conversions: Mapping[str, float],
                       active_unit_id: str | None = None,
                       out_of_range: bool = False) -> dict[str, str]:
    """
    Format every value of a batch conversion.

    Args:
        conversions: Unit id -> converted value
        active_unit_id: Unit the input was entered in
        out_of_range: The input was outside its unit's accepted range; every
            other unit shows OUT_OF_RANGE_SYMBOL instead of a clamped value

    Returns:
        Unit id -> display string, in the order of `conversions`
    """
    formatted = {}
    for unit_id, value in conversions.items():
        if out_of_range and unit_id != active_unit_id:
            formatted[unit_id] = OUT_OF_RANGE_SYMBOL
        else:
            formatted[unit_id] = format_number(value)
    return formatted
