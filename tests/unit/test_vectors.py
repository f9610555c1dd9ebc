#!/usr/bin/env python3
"""
Unit tests for the reference table.

The table is pure data; these tests check its internal consistency
without calling any split implementation.
"""

import dataclasses
import math
import sys
import unittest
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from modfcheck.vectors import (
    REFERENCE_TABLE,
    SPECIAL_VALUES,
    ReferenceVector,
    iter_vectors
)
from tests import TABLE_EPSILON

FINITE_ROWS = [v for v in REFERENCE_TABLE if v.is_finite]


class TestTableLayout(unittest.TestCase):

    def test_row_count_and_order(self):
        labels = [v.label for v in REFERENCE_TABLE]
        self.assertEqual(labels, [
            "0", "1 / pi", "log10(e)", "2 / pi", "ln(2)", "1 / sqrt(2)",
            "pi / 4", "1", "2 / sqrt(pi)", "sqrt(2)", "log2(e)", "pi / 2",
            "ln(10)", "e", "pi", "+inf",
        ])

    def test_inputs_are_non_decreasing(self):
        inputs = [v.input for v in REFERENCE_TABLE]
        self.assertEqual(inputs, sorted(inputs))

    def test_constants_match_math_module(self):
        by_label = {v.label: v.input for v in REFERENCE_TABLE}
        self.assertEqual(by_label["pi / 2"], math.pi / 2)
        self.assertEqual(by_label["pi"], math.pi)
        self.assertEqual(by_label["e"], math.e)

    def test_rounded_constants_within_row_tolerance(self):
        # 1.4142135623730950 is one ulp below math.sqrt(2)
        for v in REFERENCE_TABLE:
            if v.label == "sqrt(2)":
                self.assertLessEqual(abs(v.input - math.sqrt(2)),
                                     v.fraction_tolerance + v.integer_tolerance)
                self.assertNotEqual(v.input, math.sqrt(2))

    def test_last_row_is_positive_infinity(self):
        last = REFERENCE_TABLE[-1]
        self.assertEqual(last.input, math.inf)
        self.assertEqual(last.expected_fraction, 0.0)
        self.assertEqual(last.expected_integer, math.inf)

    def test_special_values_are_nan(self):
        self.assertTrue(SPECIAL_VALUES)
        self.assertTrue(all(math.isnan(v) for v in SPECIAL_VALUES))


class TestTableContract(unittest.TestCase):
    """Algebraic properties every finite row must satisfy."""

    def test_reconstruction(self):
        for v in FINITE_ROWS:
            with self.subTest(label=v.label):
                error = abs(v.expected_fraction + v.expected_integer - v.input)
                self.assertLessEqual(error, v.fraction_tolerance + v.integer_tolerance)

    def test_integer_part_truncates_toward_zero(self):
        for v in FINITE_ROWS:
            for case in (v, v.negated()):
                with self.subTest(label=case.label):
                    self.assertEqual(case.expected_integer, float(math.trunc(case.input)))

    def test_fraction_has_sign_of_input(self):
        for v in FINITE_ROWS:
            for case in (v, v.negated()):
                if case.expected_fraction == 0.0:
                    continue
                with self.subTest(label=case.label):
                    self.assertEqual(math.copysign(1.0, case.expected_fraction),
                                     math.copysign(1.0, case.input))

    def test_fraction_is_below_one_in_magnitude(self):
        for v in REFERENCE_TABLE:
            with self.subTest(label=v.label):
                self.assertLess(abs(v.expected_fraction), 1.0)


class TestTableTolerances(unittest.TestCase):
    """Tolerances are identical to the hand-written table literals."""

    def test_fraction_tolerance_is_base_epsilon(self):
        for v in REFERENCE_TABLE:
            with self.subTest(label=v.label):
                self.assertEqual(v.fraction_tolerance, TABLE_EPSILON)

    def test_sub_unity_integer_tolerance(self):
        for v in REFERENCE_TABLE:
            if v.input < 1.0:
                with self.subTest(label=v.label):
                    self.assertEqual(v.integer_tolerance, TABLE_EPSILON)

    def test_single_digit_integer_tolerance(self):
        for v in FINITE_ROWS:
            if v.input >= 1.0:
                with self.subTest(label=v.label):
                    self.assertEqual(v.integer_tolerance, TABLE_EPSILON * 10)

    def test_infinity_integer_tolerance_is_zero(self):
        self.assertEqual(REFERENCE_TABLE[-1].integer_tolerance, 0.0)


class TestReferenceVector(unittest.TestCase):

    def test_negated_flips_values_and_keeps_tolerances(self):
        v = ReferenceVector(3.25, 0.25, 1e-15, 3.0, 1e-14, label="x")
        n = v.negated()
        self.assertEqual(n.input, -3.25)
        self.assertEqual(n.expected_fraction, -0.25)
        self.assertEqual(n.expected_integer, -3.0)
        self.assertEqual(n.fraction_tolerance, 1e-15)
        self.assertEqual(n.integer_tolerance, 1e-14)
        self.assertEqual(n.label, "-(x)")

    def test_negated_zero_is_negative_zero(self):
        n = REFERENCE_TABLE[0].negated()
        self.assertEqual(math.copysign(1.0, n.input), -1.0)
        self.assertEqual(math.copysign(1.0, n.expected_fraction), -1.0)
        self.assertEqual(math.copysign(1.0, n.expected_integer), -1.0)

    def test_negated_infinity(self):
        n = REFERENCE_TABLE[-1].negated()
        self.assertEqual(n.input, -math.inf)
        self.assertEqual(n.expected_integer, -math.inf)
        self.assertEqual(n.integer_tolerance, 0.0)

    def test_double_negation_round_trips(self):
        v = REFERENCE_TABLE[5]
        self.assertEqual(v.negated().negated().input, v.input)

    def test_is_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            REFERENCE_TABLE[1].input = 0.0

    def test_negative_tolerance_rejected(self):
        with self.assertRaises(ValueError):
            ReferenceVector(0.5, 0.5, -1e-16, 0.0, 1e-16)
        with self.assertRaises(ValueError):
            ReferenceVector(0.5, 0.5, 1e-16, 0.0, math.nan)

    def test_is_finite(self):
        self.assertTrue(REFERENCE_TABLE[0].is_finite)
        self.assertFalse(REFERENCE_TABLE[-1].is_finite)


class TestIterVectors(unittest.TestCase):

    def test_each_row_followed_by_its_negation(self):
        vectors = list(iter_vectors())
        self.assertEqual(len(vectors), 2 * len(REFERENCE_TABLE))
        for i, row in enumerate(REFERENCE_TABLE):
            self.assertEqual(vectors[2 * i], row)
            self.assertEqual(vectors[2 * i + 1], row.negated())

    def test_without_negation(self):
        self.assertEqual(tuple(iter_vectors(include_negated=False)), REFERENCE_TABLE)


if __name__ == "__main__":
    unittest.main(verbosity=2)
