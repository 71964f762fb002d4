"""Matplotlib figures for the sample-mean distribution."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
from scipy import stats

from ..core.ecdf import EmpiricalCDF
from ..models.results import TheoreticalMoments
from .theme import DEFAULT_THEME

PALETTE = DEFAULT_THEME["palette"]


def _setup_figure(figsize=(10, 6)):
    plt.style.use("seaborn-v0_8")
    fig, ax = plt.subplots(figsize=figsize)
    return fig, ax


def _finite(values: Sequence[float]) -> np.ndarray:
    array = np.asarray(values, dtype=float).ravel()
    array = array[np.isfinite(array)]
    if array.size == 0:
        raise ValueError("Sample means do not contain finite values")
    return array


def plot_sample_mean_histogram(
    sample_means: Sequence[float],
    moments: TheoreticalMoments,
    *,
    bins: Optional[int] = None,
    show_density: bool = True,
    title: str = "Distribution of Sample Means",
) -> plt.Figure:
    """Histogram of sample means with the population mean and CLT density."""
    values = _finite(sample_means)
    nbins = bins or min(60, max(10, int(np.sqrt(values.size))))

    fig, ax = _setup_figure(figsize=(11, 6))
    ax.hist(
        values,
        bins=nbins,
        density=show_density,
        color=PALETTE["primary_blue"],
        alpha=0.75,
        edgecolor="black",
        label="Sample means",
    )

    mu = moments.population_mean
    ax.axvline(mu, color=PALETTE["warning"], linestyle="--", linewidth=2, label="Population mean")
    ax.text(
        mu,
        ax.get_ylim()[1] * 0.95,
        f"  1/λ = {mu:.2f}",
        color=PALETTE["warning"],
        ha="left",
        va="top",
    )
    observed = float(values.mean())
    ax.axvline(observed, color=PALETTE["primary_navy"], linewidth=1.5, label="Mean of sample means")

    if show_density:
        grid = np.linspace(values.min(), values.max(), 300)
        ax.plot(
            grid,
            stats.norm.pdf(grid, loc=mu, scale=moments.standard_error),
            color=PALETTE["secondary_teal"],
            linewidth=2.5,
            label="Normal approximation",
        )

    ax.set_xlabel("Sample mean")
    ax.set_ylabel("Density" if show_density else "Frequency")
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.legend(loc="upper right")
    ax.grid(True, alpha=0.25, axis="y", linestyle="--")
    fig.tight_layout()
    return fig


def plot_cdf_comparison(
    sample_means: Sequence[float],
    moments: TheoreticalMoments,
    *,
    points: int = 300,
    title: str = "Empirical vs. Theoretical CDF",
) -> plt.Figure:
    """Overlay the empirical CDF of the sample means on the normal CDF."""
    ecdf = EmpiricalCDF(_finite(sample_means))
    grid = ecdf.evaluation_grid(points)

    fig, ax = _setup_figure(figsize=(11, 6))
    ax.step(
        grid,
        ecdf(grid),
        where="post",
        color=PALETTE["primary_blue"],
        linewidth=2,
        label="Empirical CDF",
    )
    ax.plot(
        grid,
        stats.norm.cdf(grid, loc=moments.population_mean, scale=moments.standard_error),
        color=PALETTE["warning"],
        linestyle="--",
        linewidth=2,
        label="Normal CDF",
    )
    ax.set_ylim(-0.02, 1.02)
    ax.set_xlabel("Sample mean")
    ax.set_ylabel("Cumulative probability")
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.legend(loc="lower right")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    return fig


def save_figure(fig: plt.Figure, output_path: Path) -> Path:
    """Persist matplotlib figure to disk."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return output_path
