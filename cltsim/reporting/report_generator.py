"""Report generation utilities."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..models.results import CLTReport
from ..visualization import (
    build_distribution_figure,
    plot_cdf_comparison,
    plot_sample_mean_histogram,
    save_figure,
)

LOGGER = logging.getLogger(__name__)


def _json_default(obj: object) -> object:
    """JSON serializer that handles numpy/path objects gracefully."""
    if isinstance(obj, (np.integer,)):
        return int(obj)
    if isinstance(obj, (np.floating,)):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, Path):
        return str(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class ReportGenerator:
    """Persist simulation outputs to disk (summary, tables, charts)."""

    def __init__(
        self,
        output_dir: str | Path = "output",
        *,
        timestamped: bool = False,
        run_label: Optional[str] = None,
    ) -> None:
        base_dir = Path(output_dir)
        base_dir.mkdir(parents=True, exist_ok=True)
        if timestamped:
            run_label = run_label or datetime.now(timezone.utc).strftime("run_%Y%m%d_%H%M%S")
            self.output_dir = base_dir / run_label
        else:
            self.output_dir = base_dir
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.run_label = self.output_dir.name

    # ------------------------------------------------------------------ helpers
    def _write_json(self, payload: Dict[str, object], filename: str) -> Path:
        path = self.output_dir / filename
        with path.open("w", encoding="utf-8") as fh:
            json.dump(payload, fh, indent=2, default=_json_default)
        return path

    # ------------------------------------------------------------------- public
    def export_summary(self, report: CLTReport) -> Path:
        """Write scalar results and run metadata to ``summary.json``."""
        payload = report.to_metadata()
        payload["generated_at"] = datetime.now(timezone.utc)
        return self._write_json(payload, "summary.json")

    def export_tables(self, report: CLTReport) -> Dict[str, Path]:
        """Write the sample means and every non-empty extra table as CSV."""
        output: Dict[str, Path] = {}
        means = pd.DataFrame(
            {
                "simulation": np.arange(1, report.sample_means.size + 1),
                "sample_mean": report.sample_means,
            }
        )
        path = self.output_dir / "sample_means.csv"
        means.to_csv(path, index=False)
        output["sample_means"] = path

        comparison = report.summary_frame()
        path = self.output_dir / "statistics.csv"
        comparison.to_csv(path, index=False)
        output["statistics"] = path

        for key, table in report.extra_tables.items():
            if table is None or not isinstance(table, pd.DataFrame) or table.empty:
                continue
            path = self.output_dir / f"{key}.csv"
            table.to_csv(path, index=False)
            output[key] = path
        return output

    def export_visuals(self, report: CLTReport, *, interactive: bool = True) -> Dict[str, Path]:
        """Render the histogram and CDF overlay; failures are logged and skipped."""
        output: Dict[str, Path] = {}
        builders = {
            "histogram": (plot_sample_mean_histogram, "histogram.png"),
            "cdf_overlay": (plot_cdf_comparison, "cdf_overlay.png"),
        }
        for name, (builder, filename) in builders.items():
            try:
                fig = builder(report.sample_means, report.theoretical)
            except Exception as exc:  # pragma: no cover - visualisations are best effort
                LOGGER.warning("Failed to render %s: %s", name, exc)
                plt.close("all")
                continue
            output[name] = save_figure(fig, self.output_dir / filename)

        if interactive:
            try:
                figure = build_distribution_figure(report.sample_means, report.theoretical)
                path = self.output_dir / "histogram.html"
                figure.write_html(str(path), include_plotlyjs="cdn")
                output["histogram_html"] = path
            except Exception as exc:  # pragma: no cover - visualisations are best effort
                LOGGER.warning("Unable to save interactive histogram: %s", exc)
        return output

    def export_all(self, report: CLTReport, *, plots: bool = True) -> Dict[str, Path]:
        """Convenience wrapper writing summary, tables and (optionally) figures."""
        output: Dict[str, Path] = {"summary": self.export_summary(report)}
        output.update(self.export_tables(report))
        if plots:
            output.update(self.export_visuals(report))
        return output
