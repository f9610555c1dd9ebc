"""
Base interface for split-operation backends in modfcheck.

A backend wraps one implementation of the split operation
``split(x) -> (fraction_part, integer_part)`` together with the
environment bootstrap/teardown pair bracketing a conformance run.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Sequence, Tuple


class SplitBackend(ABC):
    """
    Abstract base class for all split backends.

    Every backend must implement ``split`` and ``is_available``.
    """

    name: str = 'base'
    operation: str = 'modf'

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the underlying library can be used.

        Returns
        -------
        bool
            True if ``split`` can be called
        """
        raise NotImplementedError

    @abstractmethod
    def split(self, x: float) -> Tuple[float, float]:
        """
        Split x into its fractional and integer parts.

        Parameters
        ----------
        x : float
            Value to split

        Returns
        -------
        (fraction_part, integer_part)
            Both as Python floats, both carrying the sign of x
        """
        raise NotImplementedError

    def initialize(self, argv: Optional[Sequence[str]] = None) -> None:
        """
        Prepare the environment before any check runs.

        Parameters
        ----------
        argv : sequence of str, optional
            Process arguments passed through from the entry point

        Raises
        ------
        RuntimeError
            If the environment cannot be prepared
        """

    def terminate(self) -> None:
        """Release whatever ``initialize`` acquired."""

    def get_info(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'operation': self.operation,
            'available': self.is_available(),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(operation={self.operation!r})"


class CallableBackend(SplitBackend):
    """
    Backend around an arbitrary ``split(x) -> (fraction, integer)`` callable.

    Parameters
    ----------
    func : callable
        Implementation under test
    name : str
        Name used in reports and diagnostics
    """

    def __init__(self, func: Callable[[float], Tuple[float, float]], name: str = 'custom'):
        if not callable(func):
            raise TypeError("func must be callable")
        self._func = func
        self.name = name
        self.operation = name

    def is_available(self) -> bool:
        return True

    def split(self, x: float) -> Tuple[float, float]:
        fraction, integer = self._func(x)
        return float(fraction), float(integer)
