"""
Conformance run for the split operation.

This module provides the main API of modfcheck: bracket the run with the
backend's bootstrap/teardown pair, walk the reference table in order
(each row and its negation), then check the special values.
"""

import time
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence, Union

from ._backends import BackendNotAvailableError, SplitBackend, get_backend
from ._validation import SplitConformanceError, validate_is_special, validate_vector
from .data_structures import ConformanceReport
from .vectors import REFERENCE_TABLE, SPECIAL_VALUES


class BootstrapError(RuntimeError):
    """Raised when the environment cannot be initialized before a run."""
    pass


@contextmanager
def conformance_environment(backend: SplitBackend,
                            argv: Optional[Sequence[str]] = None) -> Iterator[SplitBackend]:
    """
    Initialize the backend environment and tear it down afterwards.

    Parameters
    ----------
    backend : SplitBackend
        Backend to prepare
    argv : sequence of str, optional
        Process arguments passed through to ``backend.initialize``

    Yields
    ------
    SplitBackend
        The initialized backend

    Raises
    ------
    BootstrapError
        If the backend is unavailable or its initialization fails
    """
    if not backend.is_available():
        raise BootstrapError(f"Backend '{backend.name}' is not available")

    try:
        backend.initialize(argv)
    except Exception as e:
        raise BootstrapError(f"Initialization of backend '{backend.name}' failed: {e}") from e

    try:
        yield backend
    finally:
        backend.terminate()


def run_conformance(backend: Union[str, SplitBackend] = 'auto',
                    argv: Optional[Sequence[str]] = None,
                    fail_fast: bool = True,
                    check_symmetry: bool = True,
                    verbose: bool = False) -> ConformanceReport:
    """
    Validate a split implementation against the reference table.

    Parameters
    ----------
    backend : str or SplitBackend
        Backend name (see ``get_backend``) or instance
    argv : sequence of str, optional
        Passed through to the environment bootstrap
    fail_fast : bool
        If True, the first failing check raises SplitConformanceError.
        If False, every check runs and failures are recorded in the report.
    check_symmetry : bool
        Whether to also validate the negation of every row
    verbose : bool
        Print progress and a summary

    Returns
    -------
    ConformanceReport
        All outcomes of the run

    Raises
    ------
    BootstrapError
        If the environment cannot be initialized, or the backend name
        is unknown or not installed (no check is run)
    SplitConformanceError
        On the first failing check when ``fail_fast`` is True
    """
    if isinstance(backend, str):
        try:
            backend = get_backend(backend)
        except (BackendNotAvailableError, ValueError) as e:
            raise BootstrapError(str(e)) from e

    report = ConformanceReport(backend=backend.name)
    start = time.perf_counter()

    with conformance_environment(backend, argv):
        if verbose:
            print(f"Validating {backend.operation} against {len(REFERENCE_TABLE)} reference vectors")

        for vector in REFERENCE_TABLE:
            cases = [vector, vector.negated()] if check_symmetry else [vector]
            for case in cases:
                _record(report, fail_fast, validate_vector, backend, case)

        for value in SPECIAL_VALUES:
            _record(report, fail_fast, validate_is_special, backend, value)

    report.computation_time = time.perf_counter() - start

    if verbose:
        print(report.summary())

    return report


def _record(report: ConformanceReport, fail_fast: bool, check, *args) -> None:
    try:
        report.outcomes.append(check(*args))
    except SplitConformanceError as e:
        if fail_fast:
            raise
        report.outcomes.append(e.outcome)
        report.failures.append(str(e))
