import math
import unittest

import numpy as np

from cltsim.core.aggregation import (
    compute_sample_means,
    quantile_table,
    summarize_sample_means,
    theoretical_moments,
)
from cltsim.core.sampling import generate_exponential_batch
from cltsim.core.validator import ParameterError


class SampleMeanTests(unittest.TestCase):
    def setUp(self) -> None:
        self.batch = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [0.0, 0.0, 3.0]])

    def test_row_means(self) -> None:
        means = compute_sample_means(self.batch)
        np.testing.assert_allclose(means, [2.0, 5.0, 1.0])

    def test_means_are_read_only(self) -> None:
        means = compute_sample_means(self.batch)
        with self.assertRaises(ValueError):
            means[0] = 0.0

    def test_rejects_non_matrix_input(self) -> None:
        with self.assertRaises(ParameterError):
            compute_sample_means(np.arange(5.0))
        with self.assertRaises(ParameterError):
            compute_sample_means(np.empty((0, 3)))

    def test_summary_uses_unbiased_variance(self) -> None:
        summary = summarize_sample_means([2.0, 5.0, 1.0])
        self.assertAlmostEqual(summary.mean, 8.0 / 3.0)
        self.assertAlmostEqual(summary.variance, float(np.var([2.0, 5.0, 1.0], ddof=1)))
        self.assertAlmostEqual(summary.std, math.sqrt(summary.variance))
        self.assertEqual(summary.count, 3)

    def test_single_mean_has_undefined_variance(self) -> None:
        summary = summarize_sample_means([4.2])
        self.assertEqual(summary.count, 1)
        self.assertTrue(math.isnan(summary.variance))

    def test_empty_vector_rejected(self) -> None:
        with self.assertRaises(ParameterError):
            summarize_sample_means([])


class TheoreticalMomentTests(unittest.TestCase):
    def test_clt_predictions(self) -> None:
        moments = theoretical_moments(0.2, 40)
        self.assertAlmostEqual(moments.population_mean, 5.0)
        self.assertAlmostEqual(moments.population_std, 5.0)
        self.assertAlmostEqual(moments.standard_error, 5.0 / math.sqrt(40))
        self.assertAlmostEqual(moments.variance, 0.625)

    def test_invalid_inputs(self) -> None:
        with self.assertRaises(ParameterError):
            theoretical_moments(0.0, 40)
        with self.assertRaises(ParameterError):
            theoretical_moments(0.2, 0)


class ConvergenceTests(unittest.TestCase):
    def test_large_run_matches_clt(self) -> None:
        batch = generate_exponential_batch(0.2, 40, 20000, seed=99)
        summary = summarize_sample_means(compute_sample_means(batch))
        self.assertAlmostEqual(summary.mean, 5.0, delta=0.03)
        self.assertAlmostEqual(summary.variance / 0.625, 1.0, delta=0.05)

    def test_variance_shrinks_with_sample_size(self) -> None:
        small = summarize_sample_means(
            compute_sample_means(generate_exponential_batch(0.2, 5, 5000, seed=3))
        )
        large = summarize_sample_means(
            compute_sample_means(generate_exponential_batch(0.2, 80, 5000, seed=3))
        )
        self.assertLess(large.variance, small.variance / 8)


class QuantileTableTests(unittest.TestCase):
    def test_median_close_to_population_mean(self) -> None:
        batch = generate_exponential_batch(0.2, 40, 5000, seed=5)
        means = compute_sample_means(batch)
        table = quantile_table(means, theoretical_moments(0.2, 40))
        self.assertListEqual(list(table.columns), ["percentile", "empirical", "theoretical", "difference"])
        self.assertTrue(table["empirical"].is_monotonic_increasing)
        median = table.loc[table["percentile"] == 50].iloc[0]
        self.assertAlmostEqual(median["theoretical"], 5.0)
        self.assertAlmostEqual(median["empirical"], 5.0, delta=0.15)


if __name__ == "__main__":
    unittest.main()
