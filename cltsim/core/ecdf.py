"""Empirical distribution function over the sample-mean vector."""

from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd
from scipy import stats

from .validator import ParameterError

ArrayLike = Union[float, Sequence[float], np.ndarray]


class EmpiricalCDF:
    """
    Fraction of observations strictly below a threshold.

    Values are sorted once at construction; each query is a binary search, so
    evaluating many thresholds at once is cheap.
    """

    def __init__(self, values: Sequence[float]) -> None:
        data = np.sort(np.asarray(values, dtype=float).ravel())
        if data.size == 0:
            raise ParameterError("EmpiricalCDF requires at least one value")
        if np.isnan(data).any():
            raise ParameterError("EmpiricalCDF values must not contain NaN")
        data.setflags(write=False)
        self._values = data

    def __len__(self) -> int:
        return int(self._values.size)

    def __call__(self, x: ArrayLike) -> Union[float, np.ndarray]:
        thresholds = np.asarray(x, dtype=float)
        if np.isnan(thresholds).any():
            raise ParameterError("EmpiricalCDF thresholds must not contain NaN")
        counts = np.searchsorted(self._values, thresholds, side="left")
        fractions = counts / self._values.size
        if fractions.ndim == 0:
            return float(fractions)
        return fractions

    @property
    def values(self) -> np.ndarray:
        return self._values

    def evaluation_grid(self, points: int = 200, *, padding: float = 0.05) -> np.ndarray:
        """Evenly spaced thresholds spanning the data with a small margin."""
        if points < 2:
            raise ParameterError("points must be at least 2")
        low, high = float(self._values[0]), float(self._values[-1])
        span = high - low
        margin = span * padding if span > 0 else max(abs(low) * padding, 1.0)
        return np.linspace(low - margin, high + margin, points)

    def compare_with_normal(
        self,
        mean: float,
        sd: float,
        *,
        thresholds: Optional[Sequence[float]] = None,
        points: int = 200,
    ) -> pd.DataFrame:
        """Tabulate empirical vs. normal CDF values over a threshold grid."""
        if sd <= 0:
            raise ParameterError("sd must be positive")
        grid = np.asarray(thresholds, dtype=float) if thresholds is not None else self.evaluation_grid(points)
        empirical = np.asarray(self(grid), dtype=float).reshape(-1)
        theoretical = stats.norm.cdf(grid, loc=mean, scale=sd)
        return pd.DataFrame(
            {
                "threshold": grid.reshape(-1),
                "empirical_cdf": empirical,
                "theoretical_cdf": theoretical.reshape(-1),
                "difference": empirical - theoretical.reshape(-1),
            }
        )

    def max_deviation(self, mean: float, sd: float) -> float:
        """
        Supremum distance between this ECDF and Normal(mean, sd).

        Checked on both sides of every jump, which is where the supremum of
        |F_n - F| is attained.
        """
        if sd <= 0:
            raise ParameterError("sd must be positive")
        n = self._values.size
        normal = stats.norm.cdf(self._values, loc=mean, scale=sd)
        below = np.arange(n) / n
        above = np.arange(1, n + 1) / n
        return float(max(np.max(np.abs(normal - below)), np.max(np.abs(above - normal))))
