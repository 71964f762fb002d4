"""Figures for the sample-mean distribution."""

from .clt_plots import plot_cdf_comparison, plot_sample_mean_histogram, save_figure
from .distribution_histogram import build_distribution_figure

__all__ = [
    "build_distribution_figure",
    "plot_cdf_comparison",
    "plot_sample_mean_histogram",
    "save_figure",
]
