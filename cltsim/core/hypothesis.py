"""Two-sample t-test from summary statistics."""

from __future__ import annotations

import math

from scipy import stats

from ..models.results import SampleMeanSummary, TheoreticalMoments, TTestResult
from .validator import ParameterError


def _check_inputs(sd_x: float, n_x: int, sd_y: float, n_y: int) -> None:
    if n_x < 1 or n_y < 1:
        raise ParameterError(f"Sample counts must be positive, got n_x={n_x}, n_y={n_y}")
    if n_x + n_y <= 2:
        raise ParameterError(
            f"Insufficient degrees of freedom: n_x + n_y = {n_x + n_y} must exceed 2"
        )
    for label, sd in (("sd_x", sd_x), ("sd_y", sd_y)):
        if not math.isfinite(sd) or sd < 0:
            raise ParameterError(f"{label} must be a finite non-negative number, got {sd!r}")


def _two_tailed(statistic: float, df: float) -> float:
    if math.isinf(statistic):
        return 0.0
    return float(min(1.0, 2.0 * stats.t.sf(abs(statistic), df)))


def two_sample_t_test(
    mean_x: float,
    sd_x: float,
    n_x: int,
    mean_y: float,
    sd_y: float,
    n_y: int,
    *,
    equal_var: bool = True,
) -> TTestResult:
    """
    Compare two means given only their summary statistics.

    With ``equal_var`` the pooled-variance Student test is used with
    ``n_x + n_y - 2`` degrees of freedom; otherwise Welch's test with the
    Welch-Satterthwaite approximation. The p-value is two-tailed, so swapping
    the two samples flips the sign of the statistic but not the p-value.
    """
    _check_inputs(sd_x, n_x, sd_y, n_y)
    diff = mean_x - mean_y

    if equal_var:
        df = float(n_x + n_y - 2)
        pooled_sd = math.sqrt(((n_x - 1) * sd_x**2 + (n_y - 1) * sd_y**2) / df)
        standard_error = pooled_sd * math.sqrt(1.0 / n_x + 1.0 / n_y)
    else:
        if n_x < 2 or n_y < 2:
            raise ParameterError("Welch's test requires at least two observations per sample")
        pooled_sd = None
        var_x = sd_x**2 / n_x
        var_y = sd_y**2 / n_y
        standard_error = math.sqrt(var_x + var_y)
        denom = var_x**2 / (n_x - 1) + var_y**2 / (n_y - 1)
        df = (var_x + var_y) ** 2 / denom if denom > 0 else float(n_x + n_y - 2)

    if standard_error == 0:
        statistic = 0.0 if diff == 0 else math.copysign(math.inf, diff)
    else:
        statistic = diff / standard_error

    return TTestResult(
        statistic=float(statistic),
        df=float(df),
        pooled_sd=pooled_sd,
        p_value=_two_tailed(statistic, df),
        equal_var=equal_var,
    )


def compare_to_theory(
    summary: SampleMeanSummary,
    moments: TheoreticalMoments,
    *,
    equal_var: bool = True,
) -> TTestResult:
    """
    Test the sample means against the CLT normal approximation.

    The theoretical side is treated as a sample of the same size as the
    empirical one.
    """
    return two_sample_t_test(
        summary.mean,
        summary.std if summary.count > 1 else 0.0,
        summary.count,
        moments.population_mean,
        moments.standard_error,
        summary.count,
        equal_var=equal_var,
    )
