import os
import sys
import math
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from analytics.math_tools import MathTools


class MathToolsTestCase(unittest.TestCase):
    def test_clamp(self) -> None:
        self.assertEqual(MathTools.clamp(5, 0, 10), 5)
        self.assertEqual(MathTools.clamp(-1, 0, 10), 0)
        self.assertEqual(MathTools.clamp(11, 0, 10), 10)
        with self.assertRaises(ValueError):
            MathTools.clamp(1, 2, 1)

    def test_finite_or_zero(self) -> None:
        self.assertEqual(MathTools.finite_or_zero(3.5), 3.5)
        self.assertEqual(MathTools.finite_or_zero(math.nan), 0.0)
        self.assertEqual(MathTools.finite_or_zero(math.inf), 0.0)
        self.assertEqual(MathTools.finite_or_zero(-math.inf), 0.0)

    def test_unit_score(self) -> None:
        self.assertEqual(MathTools.unit_score(0.25), 0.25)
        self.assertEqual(MathTools.unit_score(7.0), 1.0)
        self.assertEqual(MathTools.unit_score(-2.0), 0.0)
        self.assertEqual(MathTools.unit_score(math.inf), 1.0)
        self.assertEqual(MathTools.unit_score(-math.inf), 0.0)
        self.assertEqual(MathTools.unit_score(math.nan), 0.0)

    def test_safe_ratio(self) -> None:
        self.assertEqual(MathTools.safe_ratio(6, 3), 2.0)
        self.assertEqual(MathTools.safe_ratio(1, 0), 0.0)
        self.assertEqual(MathTools.safe_ratio(1, 0, default=5.0), 5.0)
        self.assertEqual(MathTools.safe_ratio(math.inf, 1), 0.0)

    def test_mean(self) -> None:
        self.assertEqual(MathTools.mean([]), 0.0)
        self.assertAlmostEqual(MathTools.mean([1, 2, 3]), 2.0)
        self.assertAlmostEqual(MathTools.mean(x for x in (4.0, 6.0)), 5.0)
        self.assertEqual(MathTools.mean([1.0, math.nan]), 0.0)

    def test_anchored_score(self) -> None:
        self.assertEqual(MathTools.anchored_score(300, 300, 500), 1.0)
        self.assertAlmostEqual(MathTools.anchored_score(550, 300, 500), 0.5)
        self.assertAlmostEqual(MathTools.anchored_score(50, 300, 500), 0.5)
        self.assertEqual(MathTools.anchored_score(800, 300, 500), 0.0)
        self.assertEqual(MathTools.anchored_score(300, 300, 0), 0.0)
        self.assertEqual(MathTools.anchored_score(math.nan, 300, 500), 0.0)


if __name__ == "__main__":
    unittest.main()
