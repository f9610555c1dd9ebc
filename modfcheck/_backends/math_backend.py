"""
Platform C library backend.

math.modf calls straight into the platform libm, which is the reference
implementation the conformance table was written against.
"""

import math
import platform
import sys
from typing import Any, Dict, Tuple

from .base import SplitBackend


class MathBackend(SplitBackend):
    """split via math.modf. Always available."""

    name = 'math'
    operation = 'math.modf'

    def is_available(self) -> bool:
        return True

    def split(self, x: float) -> Tuple[float, float]:
        return math.modf(x)

    def get_info(self) -> Dict[str, Any]:
        info = super().get_info()
        info.update({
            'python': sys.version.split()[0],
            'platform': platform.platform(),
            'float_epsilon': sys.float_info.epsilon,
        })
        return info
