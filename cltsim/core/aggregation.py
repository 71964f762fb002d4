"""Reductions of the simulation batch and the matching CLT predictions."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
import pandas as pd
from scipy import stats

from ..models.results import SampleMeanSummary, TheoreticalMoments
from .validator import ParameterError, validate_count, validate_rate


def compute_sample_means(batch: np.ndarray) -> np.ndarray:
    """Reduce each simulation row to its arithmetic mean (read-only result)."""
    array = np.asarray(batch, dtype=float)
    if array.ndim != 2:
        raise ParameterError(f"Simulation batch must be 2-dimensional, got {array.ndim} dimension(s)")
    if array.size == 0:
        raise ParameterError("Simulation batch is empty")
    means = array.mean(axis=1)
    means.setflags(write=False)
    return means


def summarize_sample_means(means: Sequence[float]) -> SampleMeanSummary:
    """Mean and unbiased variance of the sample-mean vector."""
    values = np.asarray(means, dtype=float).ravel()
    if values.size == 0:
        raise ParameterError("Cannot summarise an empty sample-mean vector")
    variance = float(np.var(values, ddof=1)) if values.size > 1 else float("nan")
    return SampleMeanSummary(mean=float(np.mean(values)), variance=variance, count=int(values.size))


def theoretical_moments(rate: float, n_samples: int) -> TheoreticalMoments:
    """Normal(1/rate, (1/rate)/sqrt(n_samples)) predicted for the sample mean."""
    return TheoreticalMoments(
        rate=validate_rate(rate),
        n_samples=validate_count(n_samples, "n_samples"),
    )


def quantile_table(
    means: Sequence[float],
    moments: TheoreticalMoments,
    *,
    percentiles: Iterable[int] = (1, 5, 10, 25, 50, 75, 90, 95, 99),
) -> pd.DataFrame:
    """Return empirical quantiles of the sample means next to normal quantiles."""
    series = pd.Series(np.asarray(means, dtype=float))
    rows = []
    for p in percentiles:
        q = p / 100.0
        rows.append(
            {
                "percentile": int(p),
                "empirical": float(series.quantile(q)),
                "theoretical": float(
                    stats.norm.ppf(q, loc=moments.population_mean, scale=moments.standard_error)
                ),
            }
        )
    table = pd.DataFrame(rows)
    table["difference"] = table["empirical"] - table["theoretical"]
    return table
