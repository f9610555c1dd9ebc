"""
NumPy backend for modfcheck.

Splits float64 scalars with numpy.modf. Bootstrap verifies the NumPy
version and installs a floating-point error state for the run.
"""

from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from .base import SplitBackend


class NumpyBackend(SplitBackend):
    """
    split via numpy.modf on float64 scalars.

    Notes
    -----
    - Inputs are always cast to np.float64 before splitting
    - Results are returned as Python floats
    - Divide-by-zero and overflow raise during a run; invalid results
      (NaN in, NaN out) are left to the validator
    """

    name = 'numpy'
    operation = 'numpy.modf'
    min_version = (1, 20)

    def __init__(self):
        self._errstate = None

    def is_available(self) -> bool:
        return True

    def initialize(self, argv: Optional[Sequence[str]] = None) -> None:
        self._check_dependencies()
        self._errstate = np.errstate(divide='raise', over='raise',
                                     invalid='ignore', under='ignore')
        self._errstate.__enter__()

    def terminate(self) -> None:
        if self._errstate is not None:
            self._errstate.__exit__(None, None, None)
            self._errstate = None

    def _check_dependencies(self) -> None:
        """Verify the installed NumPy is recent enough."""
        np_version = tuple(int(part) for part in np.__version__.split('.')[:2])
        if np_version < self.min_version:
            raise RuntimeError(
                f"NumPy version {np.__version__} is too old. "
                f"Please upgrade to NumPy >= {'.'.join(map(str, self.min_version))}"
            )

    def split(self, x: float) -> Tuple[float, float]:
        fraction, integer = np.modf(np.float64(x))
        return float(fraction), float(integer)

    def get_info(self) -> Dict[str, Any]:
        info = super().get_info()
        finfo = np.finfo(np.float64)
        info.update({
            'numpy': np.__version__,
            'dtype': 'float64',
            'float_epsilon': float(finfo.eps),
            'precision_digits': int(finfo.precision),
        })
        return info
