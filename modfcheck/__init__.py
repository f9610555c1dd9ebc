"""
modfcheck: conformance harness for the modf split operation

Validates that an implementation of ``split(x) -> (fraction, integer)``
matches a fixed table of reference vectors within magnitude-scaled
tolerances, is odd-symmetric, and maps NaN to NaN on both outputs.

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .tolerance import (
    BASE_EPSILON,
    MagnitudeClass,
    magnitude_class,
    digit_class,
    tolerance_for
)

from .vectors import (
    ReferenceVector,
    REFERENCE_TABLE,
    SPECIAL_VALUES,
    iter_vectors
)

from .data_structures import ValidationOutcome, ConformanceReport

from ._validation import (
    SplitConformanceError,
    validate,
    validate_vector,
    validate_is_special,
    format_failure
)

from ._backends import (
    SplitBackend,
    CallableBackend,
    MathBackend,
    NumpyBackend,
    get_backend,
    get_backend_with_fallback,
    list_available_backends,
    BackendNotAvailableError
)

from .harness import BootstrapError, conformance_environment, run_conformance


def check_version():
    """Print modfcheck version and dependencies."""
    import numpy as np
    import pandas as pd
    print(f"modfcheck: {__version__}")
    print(f"NumPy: {np.__version__}")
    print(f"pandas: {pd.__version__}")

    print("\nBackends:")
    for name, info in list_available_backends().items():
        status = 'available' if info['available'] else 'not installed'
        print(f"  {name}: {info['operation']} ({status})")


__all__ = [
    # Tolerance model
    'BASE_EPSILON',
    'MagnitudeClass',
    'magnitude_class',
    'digit_class',
    'tolerance_for',

    # Reference table
    'ReferenceVector',
    'REFERENCE_TABLE',
    'SPECIAL_VALUES',
    'iter_vectors',

    # Results
    'ValidationOutcome',
    'ConformanceReport',

    # Validation
    'SplitConformanceError',
    'validate',
    'validate_vector',
    'validate_is_special',
    'format_failure',

    # Backends
    'SplitBackend',
    'CallableBackend',
    'MathBackend',
    'NumpyBackend',
    'get_backend',
    'get_backend_with_fallback',
    'list_available_backends',
    'BackendNotAvailableError',

    # Harness
    'BootstrapError',
    'conformance_environment',
    'run_conformance',

    # Version info
    'check_version',
    '__version__'
]
