import unittest

import numpy as np

from cltsim.core.validator import ParameterError
from cltsim.engine import CLTEngine, run_simulation
from cltsim.models.parameters import SimulationParameters


class CLTEngineTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.report = CLTEngine(SimulationParameters(rate=0.2, n_samples=40, n_simulations=1000, seed=2015)).run()

    def test_reference_scenario_matches_clt(self) -> None:
        self.assertAlmostEqual(self.report.summary.mean, 5.0, delta=0.1)
        self.assertAlmostEqual(self.report.summary.variance, 0.625, delta=0.05)
        self.assertGreater(self.report.t_test.p_value, 0.05)
        self.assertEqual(self.report.t_test.df, 1998)

    def test_report_contents(self) -> None:
        self.assertEqual(self.report.sample_means.shape, (1000,))
        self.assertEqual(self.report.summary.count, 1000)
        self.assertIn("cdf_comparison", self.report.extra_tables)
        self.assertIn("quantiles", self.report.extra_tables)
        self.assertEqual(self.report.validation["status"], "PASS")
        self.assertLess(self.report.validation["max_cdf_deviation"], 0.1)

    def test_summary_frame(self) -> None:
        frame = self.report.summary_frame()
        self.assertListEqual(list(frame["statistic"]), ["mean", "variance", "std"])
        theoretical = dict(zip(frame["statistic"], frame["theoretical"]))
        self.assertAlmostEqual(theoretical["mean"], 5.0)
        self.assertAlmostEqual(theoretical["variance"], 0.625)

    def test_runs_are_reproducible(self) -> None:
        again = run_simulation(0.2, 40, 1000, 2015)
        np.testing.assert_array_equal(self.report.sample_means, again.sample_means)
        self.assertEqual(self.report.summary, again.summary)
        self.assertEqual(self.report.t_test, again.t_test)

    def test_metadata_is_plain_data(self) -> None:
        metadata = self.report.to_metadata()
        self.assertEqual(metadata["parameters"]["seed"], 2015)
        self.assertAlmostEqual(metadata["theoretical"]["variance"], 0.625)
        self.assertIn("p_value", metadata["t_test"])

    def test_welch_variant(self) -> None:
        report = CLTEngine(self.report.parameters, equal_var=False).run()
        self.assertFalse(report.t_test.equal_var)
        self.assertGreater(report.t_test.p_value, 0.05)


class CLTEngineParameterTests(unittest.TestCase):
    def test_invalid_values_raise_parameter_error(self) -> None:
        for args in [(0.0, 40, 1000), (0.2, 0, 1000), (0.2, 40, 0), (-1.0, 40, 1000)]:
            with self.subTest(args=args):
                with self.assertRaises(ParameterError):
                    CLTEngine.from_values(*args, seed=1)

    def test_single_simulation_unsupported(self) -> None:
        engine = CLTEngine.from_values(0.2, 40, 1, seed=1)
        with self.assertRaises(ParameterError):
            engine.run()


class ConvergenceStudyTests(unittest.TestCase):
    def test_errors_shrink_with_sample_size(self) -> None:
        engine = CLTEngine.from_values(0.2, 40, 4000, seed=8)
        frame = engine.convergence_study([2, 200])
        self.assertListEqual(list(frame["n_samples"]), [2, 200])
        self.assertTrue(frame["theoretical_variance"].is_monotonic_decreasing)
        last = frame.iloc[-1]
        self.assertAlmostEqual(last["empirical_mean"], 5.0, delta=0.05)
        self.assertAlmostEqual(last["empirical_variance"], last["theoretical_variance"], delta=0.02)

    def test_non_positive_simulation_count_rejected(self) -> None:
        engine = CLTEngine.from_values(0.2, 40, 50, seed=1)
        for count in (0, -5):
            with self.subTest(count=count):
                with self.assertRaises(ParameterError):
                    engine.convergence_study([5], n_simulations=count)

    def test_empty_sample_sizes_rejected(self) -> None:
        engine = CLTEngine.from_values(0.2, 40, 50, seed=1)
        with self.assertRaises(ParameterError):
            engine.convergence_study([])

    def test_explicit_simulation_count_used(self) -> None:
        engine = CLTEngine.from_values(0.2, 40, 50, seed=1)
        frame = engine.convergence_study([5], n_simulations=120)
        self.assertListEqual(list(frame["n_simulations"]), [120])

    def test_default_sizes(self) -> None:
        engine = CLTEngine.from_values(0.2, 40, 200, seed=8)
        frame = engine.convergence_study()
        self.assertEqual(len(frame), 7)
        self.assertTrue((frame["n_simulations"] == 200).all())


if __name__ == "__main__":
    unittest.main()
