"""
Magnitude-scaled comparison tolerances for the modf reference table.

binary64 (double) has a machine epsilon of 2**-52 (approx. 2.22e-16). That is
slightly too strict for libm implementations across platforms, so the base
tolerance is 2**-50 (approx. 8.88e-16).

The base tolerance is then scaled to the magnitude of the expected result so
that only the significant digits representable in double precision (15-17
digits) are compared:

- 0.0xxxxxxxxxxxxxxxx  ->  BASE_EPSILON / 10
- 0.xxxxxxxxxxxxxxxxx  ->  BASE_EPSILON
- x.xxxxxxxxxxxxxxxx   ->  BASE_EPSILON * 10
- xx.xxxxxxxxxxxxxxx   ->  BASE_EPSILON * 100
"""

import math
import sys
from enum import Enum


BASE_EPSILON = 8.8817841970012523e-16


class MagnitudeClass(Enum):
    """Coarse magnitude regime of an expected result."""
    ZERO = "zero"              # exactly zero (either sign)
    SUB_UNITY = "sub_unity"    # 0 < |x| < 1, fraction dominates
    UNITY = "unity"            # 1 <= |x| < inf
    INFINITE = "infinite"      # +/- inf, must match exactly


def magnitude_class(expected: float) -> MagnitudeClass:
    """
    Classify an expected result by magnitude.

    Parameters
    ----------
    expected : float
        Reference value

    Returns
    -------
    MagnitudeClass

    Raises
    ------
    ValueError
        If expected is NaN (NaN has no magnitude)
    """
    if math.isnan(expected):
        raise ValueError("NaN has no magnitude class; use the special-value path")
    if math.isinf(expected):
        return MagnitudeClass.INFINITE
    if expected == 0.0:
        return MagnitudeClass.ZERO
    if abs(expected) < 1.0:
        return MagnitudeClass.SUB_UNITY
    return MagnitudeClass.UNITY


def digit_class(expected: float) -> int:
    """
    Decimal digit class of a finite expected result.

    Zero and 0.xxx map to 0, x.xxx to 1, xx.xx to 2, 0.0xxx to -1.

    Parameters
    ----------
    expected : float
        Finite reference value

    Returns
    -------
    int
        Power of ten applied to BASE_EPSILON
    """
    if math.isnan(expected) or math.isinf(expected):
        raise ValueError(f"digit class is only defined for finite values, got {expected!r}")
    if expected == 0.0:
        return 0
    magnitude = abs(expected)
    exponent = math.floor(math.log10(magnitude)) + 1

    # log10 rounds to the exact integer just below a power of ten
    if 10.0 ** (exponent - 1) > magnitude:
        exponent -= 1
    elif exponent <= sys.float_info.max_10_exp and magnitude >= 10.0 ** exponent:
        exponent += 1
    return exponent


def tolerance_for(expected: float, base: float = BASE_EPSILON) -> float:
    """
    Maximum acceptable absolute difference for an expected result.

    Parameters
    ----------
    expected : float
        Reference value the actual result is compared against
    base : float
        Tolerance for results of the form 0.xxx

    Returns
    -------
    float
        ``base * 10**digit_class(expected)``; 0.0 for infinite results

    Notes
    -----
    Positive classes multiply and negative classes divide so the values are
    bit-identical to ``EPSILON * 10`` and ``EPSILON / 10`` written by hand.
    """
    if not base >= 0:
        raise ValueError(f"base tolerance must be non-negative, got {base}")

    if magnitude_class(expected) is MagnitudeClass.INFINITE:
        return 0.0

    exponent = digit_class(expected)
    if exponent >= 0:
        return base * (10 ** exponent)
    return base / (10 ** -exponent)
