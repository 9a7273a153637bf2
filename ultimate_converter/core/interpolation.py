"""
Piecewise-linear lookup over parallel size sequences.

Three scans over small fixed tables (at most ~30 rows):

    lookup_to_base:   reference sequence -> base sequence
                      exact hit, else positional interpolation between
                      neighbours, else clamp to the nearest end
    lookup_from_base: base sequence -> reference sequence
                      clamp at or beyond the ends, else interpolate
    snap_from_base:   base sequence -> reference sequence without
                      interpolation (letter sizes have no fractions)

Both sequences of a pair have the same length. The base sequence is
strictly ascending; a reference sequence is ascending but may repeat values,
which yields flat segments.

All functions are Numba JIT-compiled for performance.
"""

import numpy as np
from numba import jit


@jit(nopython=True, cache=True)
def lookup_to_base(value: float, reference: np.ndarray, base: np.ndarray,
                   tolerance: float) -> float:
    """
    Map a value on a reference sequence to the base sequence.

    Args:
        value: Size in the reference system
        reference: Ascending reference sequence
        base: Base sequence, row-aligned with `reference`
        tolerance: Absolute tolerance for an exact hit

    Returns:
        Base value; clamped to base[0] / base[-1] outside the table
    """
    n = reference.shape[0]
    for i in range(n):
        if abs(value - reference[i]) < tolerance:
            return base[i]
        if i > 0 and value > reference[i - 1] and value < reference[i]:
            ratio = (value - reference[i - 1]) / (reference[i] - reference[i - 1])
            return base[i - 1] + ratio * (base[i] - base[i - 1])

    if value < reference[0]:
        return base[0]
    if value > reference[n - 1]:
        return base[n - 1]

    # Only NaN falls through
    return value


@jit(nopython=True, cache=True)
def lookup_from_base(base_value: float, base: np.ndarray,
                     reference: np.ndarray) -> float:
    """
    Map a base value onto a reference sequence.

    Args:
        base_value: Value in base units
        base: Strictly ascending base sequence
        reference: Reference sequence, row-aligned with `base`

    Returns:
        Interpolated reference value; clamped outside the table
    """
    n = base.shape[0]
    if base_value <= base[0]:
        return reference[0]
    if base_value >= base[n - 1]:
        return reference[n - 1]

    for i in range(n - 1):
        low = base[i]
        high = base[i + 1]
        if base_value >= low and base_value <= high:
            ratio = (base_value - low) / (high - low)
            return reference[i] + ratio * (reference[i + 1] - reference[i])

    return reference[0]


@jit(nopython=True, cache=True)
def snap_from_base(base_value: float, base: np.ndarray,
                   reference: np.ndarray) -> float:
    """
    Map a base value to the reference entry of the nearest base row.

    Ties between two rows resolve to the upper row.
    """
    n = base.shape[0]
    if base_value <= base[0]:
        return reference[0]
    if base_value >= base[n - 1]:
        return reference[n - 1]

    for i in range(n - 1):
        low = base[i]
        high = base[i + 1]
        if base_value >= low and base_value <= high:
            if (base_value - low) < (high - base_value):
                return reference[i]
            return reference[i + 1]

    return reference[0]

