"""
Data structures for modfcheck.

ValidationOutcome holds the result of a single split check and
ConformanceReport collects every outcome of one harness run.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd


@dataclass
class ValidationOutcome:
    """
    Result of validating one input against the split operation.

    Attributes
    ----------
    operation : str
        Display name of the split operation (e.g. 'math.modf')
    value : float
        Input passed to the split operation
    actual_fraction : float
        Fractional part returned by the implementation
    actual_integer : float
        Integer part returned by the implementation
    expected_fraction : float
        Reference fractional part (NaN on the special-value path)
    expected_integer : float
        Reference integer part (NaN on the special-value path)
    delta_fraction : float
        |actual_fraction - expected_fraction|
    delta_integer : float
        |actual_integer - expected_integer|
    fraction_tolerance : float
        Allowed delta on the fractional part
    integer_tolerance : float
        Allowed delta on the integer part
    passed : bool
        Whether both outputs are acceptable
    kind : str
        'tolerance' for reference vectors, 'special' for the NaN path
    label : str
        Name of the input (e.g. "pi / 2"), empty if none
    """
    operation: str
    value: float
    actual_fraction: float
    actual_integer: float
    expected_fraction: float
    expected_integer: float
    delta_fraction: float
    delta_integer: float
    fraction_tolerance: float
    integer_tolerance: float
    passed: bool
    kind: str = 'tolerance'
    label: str = ""

    @property
    def reconstruction_error(self) -> float:
        """|fraction + integer - value| for finite inputs, NaN otherwise."""
        if not math.isfinite(self.value):
            return math.nan
        return abs((self.actual_fraction + self.actual_integer) - self.value)


@dataclass
class ConformanceReport:
    """
    Every check performed during one harness run.

    Attributes
    ----------
    backend : str
        Name of the backend under test
    outcomes : list of ValidationOutcome
        One entry per check, in execution order
    failures : list of str
        Formatted diagnostic line for each failed check
    """
    backend: str
    outcomes: List[ValidationOutcome] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)
    computation_time: Optional[float] = None

    @property
    def passed(self) -> bool:
        return not self.failures and all(o.passed for o in self.outcomes)

    @property
    def n_checks(self) -> int:
        return len(self.outcomes)

    def to_frame(self) -> pd.DataFrame:
        """
        Tabulate outcomes, one row per check.

        Returns
        -------
        pd.DataFrame
            Columns mirror the ValidationOutcome fields
        """
        columns = [
            'label', 'kind', 'value',
            'actual_fraction', 'expected_fraction', 'delta_fraction', 'fraction_tolerance',
            'actual_integer', 'expected_integer', 'delta_integer', 'integer_tolerance',
            'passed',
        ]
        rows = [{name: getattr(o, name) for name in columns} for o in self.outcomes]
        return pd.DataFrame(rows, columns=columns)

    def summary(self) -> str:
        """Short multi-line text summary of the run."""
        n_failed = sum(1 for o in self.outcomes if not o.passed)
        lines = [
            f"Backend: {self.backend}",
            f"Checks: {self.n_checks} ({n_failed} failed)",
            f"Status: {'PASS' if self.passed else 'FAIL'}",
        ]
        if self.computation_time is not None:
            lines.append(f"Time: {self.computation_time * 1e3:.3f} ms")
        return "\n".join(lines)
