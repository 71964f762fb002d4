"""Result data models for reporting."""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

from .parameters import SimulationParameters


class SampleMeanSummary(BaseModel):
    """Mean, unbiased variance and count of the sample-mean vector."""

    mean: float
    variance: float = Field(..., description="Unbiased (n-1) variance; nan for a single value.")
    count: int = Field(..., ge=1)

    @property
    def std(self) -> float:
        return math.sqrt(self.variance) if self.variance >= 0 else float("nan")


class TheoreticalMoments(BaseModel):
    """Normal approximation predicted by the Central Limit Theorem."""

    rate: float = Field(..., gt=0)
    n_samples: int = Field(..., ge=1)

    @property
    def population_mean(self) -> float:
        return 1.0 / self.rate

    @property
    def population_std(self) -> float:
        return 1.0 / self.rate

    @property
    def standard_error(self) -> float:
        """Expected standard deviation of the sample mean."""
        return self.population_std / math.sqrt(self.n_samples)

    @property
    def variance(self) -> float:
        return 1.0 / (self.rate**2 * self.n_samples)


class TTestResult(BaseModel):
    """Outcome of a two-sample t-test computed from summary statistics."""

    statistic: float
    df: float = Field(..., gt=0)
    pooled_sd: Optional[float] = Field(
        None, description="Pooled standard deviation; None for Welch's test."
    )
    p_value: float = Field(..., ge=0.0, le=1.0)
    equal_var: bool = True

    def rejects(self, alpha: float = 0.05) -> bool:
        """True when the null hypothesis of equal means is rejected at ``alpha``."""
        return self.p_value < alpha


class CLTReport(BaseModel):
    """Aggregates everything produced by a single pipeline run."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    parameters: SimulationParameters
    sample_means: np.ndarray = Field(..., description="Per-simulation sample means.")
    summary: SampleMeanSummary
    theoretical: TheoreticalMoments
    t_test: TTestResult
    validation: Dict[str, Any] = Field(default_factory=dict)
    extra_tables: Dict[str, pd.DataFrame] = Field(
        default_factory=dict,
        description="Additional data tables (CDF comparison, quantiles).",
    )

    def summary_frame(self) -> pd.DataFrame:
        """Return empirical statistics next to their CLT predictions."""
        rows = [
            ("mean", self.summary.mean, self.theoretical.population_mean),
            ("variance", self.summary.variance, self.theoretical.variance),
            ("std", self.summary.std, self.theoretical.standard_error),
        ]
        frame = pd.DataFrame(rows, columns=["statistic", "empirical", "theoretical"])
        frame["difference"] = frame["empirical"] - frame["theoretical"]
        return frame

    def to_metadata(self) -> Dict[str, object]:
        """JSON-friendly view of the scalar results."""
        return {
            "parameters": self.parameters.to_metadata(),
            "summary": {
                "mean": self.summary.mean,
                "variance": self.summary.variance,
                "std": self.summary.std,
                "count": self.summary.count,
            },
            "theoretical": {
                "mean": self.theoretical.population_mean,
                "variance": self.theoretical.variance,
                "std": self.theoretical.standard_error,
            },
            "t_test": self.t_test.model_dump(),
            "validation": dict(self.validation),
        }
