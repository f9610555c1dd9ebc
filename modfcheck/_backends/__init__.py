"""
Backend module initialization.

Provides a unified interface for selecting the split implementation under test.
"""

import warnings
from typing import Any, Dict

from .base import SplitBackend, CallableBackend
from .math_backend import MathBackend

try:
    from .numpy_backend import NumpyBackend
    NUMPY_AVAILABLE = True
except ImportError:
    NUMPY_AVAILABLE = False
    NumpyBackend = None


class BackendNotAvailableError(ImportError):
    """Raised when a requested backend is not available."""
    pass


_MATH_ALIASES = ('auto', 'math', 'libm', 'stdlib')
_NUMPY_ALIASES = ('numpy', 'np')


def get_backend(backend: str = 'auto') -> SplitBackend:
    """
    Get a split backend by name.

    Parameters
    ----------
    backend : str
        'auto', 'math', 'libm', 'stdlib', 'numpy' or 'np'

    Returns
    -------
    SplitBackend
        Backend instance (not yet initialized)

    Raises
    ------
    BackendNotAvailableError
        If the library behind the backend is not installed
    ValueError
        If the name is unknown
    """
    name = backend.lower()

    if name in _MATH_ALIASES:
        return MathBackend()

    if name in _NUMPY_ALIASES:
        if not NUMPY_AVAILABLE:
            raise BackendNotAvailableError(
                "NumPy backend requires NumPy. "
                "Install with: pip install numpy"
            )
        return NumpyBackend()

    raise ValueError(
        f"Unknown backend: {backend}. "
        f"Available: {', '.join(_MATH_ALIASES + _NUMPY_ALIASES)}"
    )


def get_backend_with_fallback(backend: str = 'auto',
                              fallback: str = 'math') -> SplitBackend:
    """
    Get backend with automatic fallback.

    Parameters
    ----------
    backend : str
        Primary backend choice
    fallback : str
        Backend used if the primary one is not available

    Returns
    -------
    SplitBackend
    """
    try:
        return get_backend(backend)
    except BackendNotAvailableError as e:
        warnings.warn(
            f"Backend '{backend}' not available: {e}. "
            f"Falling back to '{fallback}' backend."
        )
        return get_backend(fallback)


def list_available_backends() -> Dict[str, Dict[str, Any]]:
    """
    List all backends and their availability.

    Returns
    -------
    dict
        Backend metadata keyed by canonical name
    """
    backends = {
        'math': {
            'available': True,
            'backend_class': 'MathBackend',
            'operation': 'math.modf',
            'description': 'Platform C library via the math module (always available)'
        },
        'numpy': {
            'available': NUMPY_AVAILABLE,
            'backend_class': 'NumpyBackend',
            'operation': 'numpy.modf',
            'description': 'NumPy ufunc on float64 scalars'
        },
    }
    return backends


__all__ = [
    'SplitBackend',
    'CallableBackend',
    'MathBackend',
    'NumpyBackend',
    'get_backend',
    'get_backend_with_fallback',
    'list_available_backends',
    'BackendNotAvailableError',
    'NUMPY_AVAILABLE',
]
