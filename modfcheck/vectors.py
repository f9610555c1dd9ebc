"""
Reference table for the modf split operation.

Each row pairs an input with its expected fractional part, expected integer
part and one tolerance per output. Inputs cover signed zero (via negation),
values below 1 in magnitude, exactly 1, values above 1 with non-trivial
fractional parts, and positive infinity.
"""

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

from .tolerance import tolerance_for


@dataclass(frozen=True)
class ReferenceVector:
    """
    One row of the reference table.

    Attributes
    ----------
    input : float
        Value passed to the split operation
    expected_fraction : float
        Reference fractional part (same sign as input)
    fraction_tolerance : float
        Maximum absolute difference allowed on the fractional part
    expected_integer : float
        Reference integer part (input truncated toward zero)
    integer_tolerance : float
        Maximum absolute difference allowed on the integer part
    label : str
        Human-readable name of the input
    """
    input: float
    expected_fraction: float
    fraction_tolerance: float
    expected_integer: float
    integer_tolerance: float
    label: str = ""

    def __post_init__(self):
        for name in ('fraction_tolerance', 'integer_tolerance'):
            value = getattr(self, name)
            if not value >= 0.0:
                raise ValueError(f"{name} must be >= 0, got {value!r}")

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.input)

    def negated(self) -> 'ReferenceVector':
        """Mirror row: input and both expected outputs negated, tolerances kept."""
        label = f"-({self.label})" if self.label else ""
        return ReferenceVector(
            input=-self.input,
            expected_fraction=-self.expected_fraction,
            fraction_tolerance=self.fraction_tolerance,
            expected_integer=-self.expected_integer,
            integer_tolerance=self.integer_tolerance,
            label=label,
        )


def _row(value: float, fraction: float, integer: float, label: str) -> ReferenceVector:
    return ReferenceVector(
        input=value,
        expected_fraction=fraction,
        fraction_tolerance=tolerance_for(fraction),
        expected_integer=integer,
        integer_tolerance=tolerance_for(integer),
        label=label,
    )


REFERENCE_TABLE: Tuple[ReferenceVector, ...] = (
    _row(0.0,                 0.0,                 0.0,      "0"),
    _row(0.31830988618379067, 0.31830988618379067, 0.0,      "1 / pi"),
    _row(0.43429448190325183, 0.43429448190325183, 0.0,      "log10(e)"),
    _row(0.63661977236758134, 0.63661977236758134, 0.0,      "2 / pi"),
    _row(0.69314718055994531, 0.69314718055994531, 0.0,      "ln(2)"),
    _row(0.70710678118654752, 0.70710678118654752, 0.0,      "1 / sqrt(2)"),
    _row(0.78539816339744831, 0.78539816339744831, 0.0,      "pi / 4"),
    _row(1.0,                 0.0,                 1.0,      "1"),
    _row(1.1283791670955126,  0.1283791670955126,  1.0,      "2 / sqrt(pi)"),
    _row(1.4142135623730950,  0.4142135623730950,  1.0,      "sqrt(2)"),
    _row(1.4426950408889634,  0.4426950408889634,  1.0,      "log2(e)"),
    _row(1.5707963267948966,  0.5707963267948966,  1.0,      "pi / 2"),
    _row(2.3025850929940457,  0.3025850929940457,  2.0,      "ln(10)"),
    _row(2.7182818284590452,  0.7182818284590452,  2.0,      "e"),
    _row(3.1415926535897932,  0.1415926535897932,  3.0,      "pi"),
    _row(math.inf,            0.0,                 math.inf, "+inf"),
)

# Inputs whose split must be NaN on both outputs
SPECIAL_VALUES: Tuple[float, ...] = (math.nan,)


def iter_vectors(include_negated: bool = True) -> Iterator[ReferenceVector]:
    """
    Iterate the reference table in order.

    Parameters
    ----------
    include_negated : bool
        If True, each row is immediately followed by its negation

    Yields
    ------
    ReferenceVector
    """
    for vector in REFERENCE_TABLE:
        yield vector
        if include_negated:
            yield vector.negated()
