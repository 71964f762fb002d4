"""Interactive Plotly histogram of sample means."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import plotly.graph_objects as go
from scipy import stats

from ..models.results import TheoreticalMoments
from .theme import DEFAULT_THEME


def _reference_line(x: float, label: str, color: str, y_label: float, dash: str):
    shape = dict(
        type="line",
        x0=x,
        x1=x,
        y0=0,
        y1=1,
        xref="x",
        yref="paper",
        line=dict(color=color, width=2, dash=dash),
    )
    annotation = dict(
        x=x,
        y=y_label,
        xref="x",
        yref="paper",
        text=label,
        showarrow=False,
        font=dict(color=color),
    )
    return shape, annotation


def build_distribution_figure(
    sample_means: Sequence[float],
    moments: TheoreticalMoments,
    *,
    theme: Optional[dict] = None,
) -> go.Figure:
    """
    Create the sample-mean histogram with the normal density overlay.
    """
    theme = theme or DEFAULT_THEME
    palette = theme["palette"]
    values = np.asarray(sample_means, dtype=float)
    values = values[np.isfinite(values)]
    if values.size == 0:
        raise ValueError("Sample means do not contain finite values")

    nbins = min(60, max(20, int(np.sqrt(values.size))))
    fig = go.Figure()
    fig.add_trace(
        go.Histogram(
            x=values,
            nbinsx=nbins,
            histnorm="probability density",
            opacity=0.85,
            marker=dict(color=palette["primary_blue"], line=dict(color="#424242", width=0.5)),
            hovertemplate="Mean %{x:.3f}<br>Density %{y:.3f}<extra>Sample means</extra>",
            name="Sample means",
        )
    )

    grid = np.linspace(values.min(), values.max(), 300)
    fig.add_trace(
        go.Scatter(
            x=grid,
            y=stats.norm.pdf(grid, loc=moments.population_mean, scale=moments.standard_error),
            mode="lines",
            line=dict(color=palette["secondary_teal"], width=3),
            name="Normal approximation",
        )
    )

    population_shape, population_note = _reference_line(
        moments.population_mean, "Population mean", palette["warning"], 1.02, "dot"
    )
    observed_shape, observed_note = _reference_line(
        float(values.mean()), "Mean of sample means", palette["primary_navy"], 1.06, "dash"
    )

    fig.update_layout(
        template=theme["plotly_template"],
        title="Distribution of Sample Means",
        bargap=0.02,
        margin=dict(l=60, r=30, t=80, b=60),
        xaxis=dict(title="Sample mean"),
        yaxis=dict(title="Density"),
        shapes=[population_shape, observed_shape],
        annotations=[population_note, observed_note],
    )
    return fig
