"""
Validation of the split operation against reference values.

Both outputs of the split are checked independently, each against its own
tolerance, so an implementation that reconstructs the input correctly but
swaps or misrounds one of the outputs is still caught.
"""

import math

from ._backends.base import SplitBackend
from .data_structures import ValidationOutcome
from .vectors import ReferenceVector


class SplitConformanceError(AssertionError):
    """
    Raised when the split operation disagrees with a reference result.

    Attributes
    ----------
    outcome : ValidationOutcome
        The failed check
    """

    def __init__(self, message: str, outcome: ValidationOutcome):
        super().__init__(message)
        self.outcome = outcome


def format_failure(operation: str, value: float,
                   actual_fraction: float, actual_integer: float,
                   expected_fraction: float, expected_integer: float) -> str:
    """
    Format a one-line diagnostic with 17 significant digits per result.

    Returns
    -------
    str
        e.g. ``math.modf(3.14159) returned  0.14159265358979312 with an intpart
        of  3 when it should have returned ...``
    """
    return (
        "%s(%g) returned %20.17g with an intpart of %20.17g "
        "when it should have returned %20.17g with an intpart of %20.17g"
        % (operation, value, actual_fraction, actual_integer,
           expected_fraction, expected_integer)
    )


def _delta(actual: float, expected: float) -> float:
    # equal infinities subtract to NaN
    if actual == expected:
        return 0.0
    return abs(actual - expected)


def validate(backend: SplitBackend, value: float,
             expected_fraction: float, fraction_tolerance: float,
             expected_integer: float, integer_tolerance: float,
             label: str = "") -> ValidationOutcome:
    """
    Split ``value`` and compare both outputs with their expected results.

    Parameters
    ----------
    backend : SplitBackend
        Implementation under test
    value : float
        Input to split
    expected_fraction, fraction_tolerance : float
        Reference fractional part and the allowed absolute difference
    expected_integer, integer_tolerance : float
        Reference integer part and the allowed absolute difference
    label : str
        Name of the input, carried into the outcome

    Returns
    -------
    ValidationOutcome
        The passing outcome

    Raises
    ------
    SplitConformanceError
        If either difference exceeds its tolerance (a NaN difference never passes)
    """
    actual_fraction, actual_integer = backend.split(value)

    delta_fraction = _delta(actual_fraction, expected_fraction)
    delta_integer = _delta(actual_integer, expected_integer)

    passed = delta_fraction <= fraction_tolerance and delta_integer <= integer_tolerance

    outcome = ValidationOutcome(
        operation=backend.operation,
        value=value,
        actual_fraction=actual_fraction,
        actual_integer=actual_integer,
        expected_fraction=expected_fraction,
        expected_integer=expected_integer,
        delta_fraction=delta_fraction,
        delta_integer=delta_integer,
        fraction_tolerance=fraction_tolerance,
        integer_tolerance=integer_tolerance,
        passed=bool(passed),
        kind='tolerance',
        label=label,
    )

    if not outcome.passed:
        message = format_failure(backend.operation, value,
                                 actual_fraction, actual_integer,
                                 expected_fraction, expected_integer)
        raise SplitConformanceError(message, outcome)

    return outcome


def validate_vector(backend: SplitBackend, vector: ReferenceVector) -> ValidationOutcome:
    """Validate one reference table row."""
    return validate(backend, vector.input,
                    vector.expected_fraction, vector.fraction_tolerance,
                    vector.expected_integer, vector.integer_tolerance,
                    label=vector.label)


def validate_is_special(backend: SplitBackend, value: float) -> ValidationOutcome:
    """
    Check that splitting ``value`` (normally NaN) yields NaN on both outputs.

    Raises
    ------
    SplitConformanceError
        If either output is a real number
    """
    actual_fraction, actual_integer = backend.split(value)

    passed = math.isnan(actual_fraction) and math.isnan(actual_integer)

    outcome = ValidationOutcome(
        operation=backend.operation,
        value=value,
        actual_fraction=actual_fraction,
        actual_integer=actual_integer,
        expected_fraction=math.nan,
        expected_integer=math.nan,
        delta_fraction=math.nan,
        delta_integer=math.nan,
        fraction_tolerance=0.0,
        integer_tolerance=0.0,
        passed=passed,
        kind='special',
        label=repr(value),
    )

    if not passed:
        message = format_failure(backend.operation, value,
                                 actual_fraction, actual_integer,
                                 math.nan, math.nan)
        raise SplitConformanceError(message, outcome)

    return outcome
