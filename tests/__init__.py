"""
modfcheck Test Suite
====================

Unit tests for the tolerance model, reference table, validator, backends,
harness and CLI, plus end-to-end conformance runs against every available
split backend.

Run tests:
    python -m pytest tests/ -v
"""

# Base tolerance as written in the reference table
TABLE_EPSILON = 8.8817841970012523e-16

# Checks per run: 16 rows, 16 negations, 1 NaN
N_CHECKS_WITH_SYMMETRY = 33
N_CHECKS_WITHOUT_SYMMETRY = 17
