"""High-level orchestration of the sample-mean simulation pipeline."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import pandas as pd
from pydantic import ValidationError

from .core.aggregation import (
    compute_sample_means,
    quantile_table,
    summarize_sample_means,
    theoretical_moments,
)
from .core.ecdf import EmpiricalCDF
from .core.hypothesis import compare_to_theory
from .core.sampling import generate_exponential_batch
from .core.validation import validate_sample_means
from .core.validator import ParameterError, validate_count
from .models.parameters import SimulationParameters
from .models.results import CLTReport

LOGGER = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZES = (1, 5, 10, 20, 40, 80, 160)


class CLTEngine:
    """Primary entry point for running the exponential sample-mean pipeline."""

    def __init__(
        self,
        parameters: Optional[SimulationParameters] = None,
        *,
        equal_var: bool = True,
        cdf_points: int = 200,
    ) -> None:
        self.parameters = parameters or SimulationParameters()
        self.equal_var = equal_var
        self.cdf_points = cdf_points

    @classmethod
    def from_values(
        cls,
        rate: float,
        n_samples: int,
        n_simulations: int,
        seed: Optional[int] = None,
        **kwargs,
    ) -> "CLTEngine":
        """Build an engine from raw values, raising ParameterError when invalid."""
        try:
            parameters = SimulationParameters(
                rate=rate, n_samples=n_samples, n_simulations=n_simulations, seed=seed
            )
        except ValidationError as exc:
            messages = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            raise ParameterError(f"Invalid simulation parameters: {messages}") from exc
        return cls(parameters, **kwargs)

    # ------------------------------------------------------------------ pipeline
    def run(self) -> CLTReport:
        """Run every stage once and return the assembled report."""
        params = self.parameters
        LOGGER.info(
            "Simulating %d x %d exponential draws (rate=%s, seed=%s)",
            params.n_simulations,
            params.n_samples,
            params.rate,
            params.seed,
        )
        batch = generate_exponential_batch(
            params.rate, params.n_samples, params.n_simulations, seed=params.seed
        )
        means = compute_sample_means(batch)
        summary = summarize_sample_means(means)
        moments = theoretical_moments(params.rate, params.n_samples)
        LOGGER.info(
            "Sample means: mean=%.4f variance=%.4f (theory %.4f / %.4f)",
            summary.mean,
            summary.variance,
            moments.population_mean,
            moments.variance,
        )

        t_test = compare_to_theory(summary, moments, equal_var=self.equal_var)
        LOGGER.info("t=%.4f df=%.1f p=%.4f", t_test.statistic, t_test.df, t_test.p_value)

        validation = validate_sample_means(summary, moments, t_test=t_test)
        for warning in validation.warnings:
            LOGGER.warning("Validation warning: %s", warning)

        ecdf = EmpiricalCDF(means)
        cdf_table = ecdf.compare_with_normal(
            moments.population_mean, moments.standard_error, points=self.cdf_points
        )
        validation_payload = validation.to_dict()
        validation_payload["max_cdf_deviation"] = ecdf.max_deviation(
            moments.population_mean, moments.standard_error
        )

        return CLTReport(
            parameters=params,
            sample_means=means,
            summary=summary,
            theoretical=moments,
            t_test=t_test,
            validation=validation_payload,
            extra_tables={
                "cdf_comparison": cdf_table,
                "quantiles": quantile_table(means, moments),
            },
        )

    # --------------------------------------------------------------- convergence
    def convergence_study(
        self,
        sample_sizes: Optional[Iterable[int]] = None,
        *,
        n_simulations: Optional[int] = None,
    ) -> pd.DataFrame:
        """
        Repeat the simulation over increasing sample sizes.

        Each size uses the engine's rate and seed so rows are reproducible.
        """
        params = self.parameters
        sizes = DEFAULT_SAMPLE_SIZES if sample_sizes is None else list(sample_sizes)
        if not sizes:
            raise ParameterError("sample_sizes must contain at least one size")
        simulations = (
            params.n_simulations
            if n_simulations is None
            else validate_count(n_simulations, "n_simulations")
        )
        rows = []
        for size in sizes:
            batch = generate_exponential_batch(params.rate, size, simulations, seed=params.seed)
            summary = summarize_sample_means(compute_sample_means(batch))
            moments = theoretical_moments(params.rate, size)
            rows.append(
                {
                    "n_samples": int(size),
                    "n_simulations": int(simulations),
                    "empirical_mean": summary.mean,
                    "theoretical_mean": moments.population_mean,
                    "empirical_variance": summary.variance,
                    "theoretical_variance": moments.variance,
                }
            )
            LOGGER.debug("Convergence row n_samples=%d mean=%.4f", size, summary.mean)
        frame = pd.DataFrame(rows)
        frame["mean_abs_error"] = (frame["empirical_mean"] - frame["theoretical_mean"]).abs()
        frame["variance_abs_error"] = (
            frame["empirical_variance"] - frame["theoretical_variance"]
        ).abs()
        return frame


def run_simulation(
    rate: float = 0.2,
    n_samples: int = 40,
    n_simulations: int = 1000,
    seed: Optional[int] = 2015,
    *,
    equal_var: bool = True,
) -> CLTReport:
    """Convenience wrapper around :class:`CLTEngine` for one-off runs."""
    return CLTEngine.from_values(
        rate, n_samples, n_simulations, seed, equal_var=equal_var
    ).run()
