import unittest

import numpy as np
from scipy import stats

from cltsim.core.ecdf import EmpiricalCDF
from cltsim.core.validator import ParameterError


class EmpiricalCDFTests(unittest.TestCase):
    def setUp(self) -> None:
        self.ecdf = EmpiricalCDF([3.0, 1.0, 2.0, 2.0])

    def test_counts_values_strictly_below_threshold(self) -> None:
        self.assertAlmostEqual(self.ecdf(1.0), 0.0)
        self.assertAlmostEqual(self.ecdf(2.0), 0.25)
        self.assertAlmostEqual(self.ecdf(2.5), 0.75)
        self.assertAlmostEqual(self.ecdf(3.0), 0.75)
        self.assertAlmostEqual(self.ecdf(3.01), 1.0)

    def test_limits(self) -> None:
        self.assertEqual(self.ecdf(-np.inf), 0.0)
        self.assertEqual(self.ecdf(np.inf), 1.0)

    def test_scalar_query_returns_float(self) -> None:
        self.assertIsInstance(self.ecdf(2.0), float)

    def test_vectorised_query(self) -> None:
        result = self.ecdf([0.0, 2.0, 10.0])
        self.assertIsInstance(result, np.ndarray)
        np.testing.assert_allclose(result, [0.0, 0.25, 1.0])

    def test_monotone_non_decreasing(self) -> None:
        values = np.random.default_rng(4).exponential(5.0, size=500)
        ecdf = EmpiricalCDF(values)
        grid = ecdf.evaluation_grid(1000)
        evaluated = ecdf(grid)
        self.assertTrue(np.all(np.diff(evaluated) >= 0))
        self.assertTrue(np.all((evaluated >= 0) & (evaluated <= 1)))

    def test_nan_threshold_rejected(self) -> None:
        with self.assertRaises(ParameterError):
            self.ecdf(float("nan"))
        with self.assertRaises(ParameterError):
            self.ecdf([1.0, float("nan")])

    def test_rejects_empty_or_nan_values(self) -> None:
        with self.assertRaises(ParameterError):
            EmpiricalCDF([])
        with self.assertRaises(ParameterError):
            EmpiricalCDF([1.0, float("nan")])

    def test_evaluation_grid_spans_data(self) -> None:
        grid = self.ecdf.evaluation_grid(50)
        self.assertEqual(grid.size, 50)
        self.assertLess(grid[0], 1.0)
        self.assertGreater(grid[-1], 3.0)

    def test_grid_for_constant_values(self) -> None:
        grid = EmpiricalCDF([2.0, 2.0]).evaluation_grid(3)
        self.assertLess(grid[0], 2.0)
        self.assertGreater(grid[-1], 2.0)


class NormalComparisonTests(unittest.TestCase):
    def setUp(self) -> None:
        self.values = np.random.default_rng(21).normal(5.0, 0.8, size=2000)
        self.ecdf = EmpiricalCDF(self.values)

    def test_comparison_table_columns(self) -> None:
        table = self.ecdf.compare_with_normal(5.0, 0.8, points=25)
        self.assertEqual(len(table), 25)
        self.assertListEqual(
            list(table.columns), ["threshold", "empirical_cdf", "theoretical_cdf", "difference"]
        )
        self.assertLess(table["difference"].abs().max(), 0.05)

    def test_explicit_thresholds(self) -> None:
        table = self.ecdf.compare_with_normal(5.0, 0.8, thresholds=[5.0])
        self.assertAlmostEqual(float(table["theoretical_cdf"].iloc[0]), 0.5)

    def test_max_deviation_matches_kolmogorov_smirnov(self) -> None:
        expected = stats.kstest(self.values, "norm", args=(5.0, 0.8)).statistic
        self.assertAlmostEqual(self.ecdf.max_deviation(5.0, 0.8), expected, places=10)

    def test_non_positive_sd_rejected(self) -> None:
        with self.assertRaises(ParameterError):
            self.ecdf.max_deviation(5.0, 0.0)


if __name__ == "__main__":
    unittest.main()
