"""
Pytest configuration for modfcheck tests.
"""

import sys
from pathlib import Path

import numpy as np

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

np.set_printoptions(precision=17, suppress=False)


def pytest_configure(config):
    """Register modfcheck markers."""
    config.addinivalue_line(
        "markers", "conformance: end-to-end run of the reference table"
    )
    config.addinivalue_line(
        "markers", "edge_case: signed zero, infinity and NaN checks"
    )


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "integration" in str(item.path):
            item.add_marker("conformance")

        if any(word in item.name for word in ("nan", "inf", "zero", "special")):
            item.add_marker("edge_case")
