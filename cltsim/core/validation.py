"""Sanity checks for a finished simulation run."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from ..models.results import SampleMeanSummary, TheoreticalMoments, TTestResult


@dataclass
class ValidationResult:
    """Basic container for validation outcomes."""

    status: str
    failed_checks: Sequence[str]
    warnings: Sequence[str]

    def to_dict(self) -> Dict[str, object]:
        return {
            "status": self.status,
            "failed_checks": list(self.failed_checks),
            "warnings": list(self.warnings),
        }


def validate_sample_means(
    summary: SampleMeanSummary,
    moments: TheoreticalMoments,
    *,
    t_test: Optional[TTestResult] = None,
    mean_tolerance: float = 0.05,
    variance_band: tuple = (0.8, 1.25),
    alpha: float = 0.05,
) -> ValidationResult:
    """Compare the observed sample-mean statistics with the CLT predictions."""
    failed: list[str] = []
    warnings: list[str] = []

    if not math.isfinite(summary.mean):
        failed.append("non_finite_mean")
    if summary.count > 1 and not math.isfinite(summary.variance):
        failed.append("non_finite_variance")
    if failed:
        return ValidationResult(status="FAIL", failed_checks=failed, warnings=warnings)

    expected_mean = moments.population_mean
    if abs(summary.mean - expected_mean) > mean_tolerance * expected_mean:
        warnings.append("mean_off_target")

    if summary.count > 1:
        ratio = summary.variance / moments.variance
        low, high = variance_band
        if ratio < low or ratio > high:
            warnings.append("variance_ratio_out_of_band")
    else:
        warnings.append("single_simulation")

    if t_test is not None and t_test.rejects(alpha):
        warnings.append("t_test_rejects_normal_approximation")

    return ValidationResult(status="PASS", failed_checks=failed, warnings=warnings)


__all__ = ["ValidationResult", "validate_sample_means"]
