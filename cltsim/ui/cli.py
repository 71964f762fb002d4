"""Typer-based command line interface for the sample-mean simulation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .. import config
from ..engine import CLTEngine
from ..models.results import CLTReport
from ..reporting import ReportGenerator

app = typer.Typer(help="Central Limit Theorem simulation of exponential sample means")
console = Console()


def _configure_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else getattr(logging, config.log_level(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _build_engine(
    rate: Optional[float],
    samples: Optional[int],
    simulations: Optional[int],
    seed: Optional[int],
    welch: bool,
) -> CLTEngine:
    try:
        defaults = config.default_parameters()
        return CLTEngine.from_values(
            rate if rate is not None else defaults.rate,
            samples if samples is not None else defaults.n_samples,
            simulations if simulations is not None else defaults.n_simulations,
            seed if seed is not None else defaults.seed,
            equal_var=not welch,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _build_summary_table(report: CLTReport) -> Table:
    """Create a Rich table of empirical vs. theoretical statistics."""
    table = Table(title="Sample Mean Statistics", show_lines=False)
    for column in ("Statistic", "Empirical", "Theoretical", "Difference"):
        table.add_column(column, justify="right" if column != "Statistic" else "left")
    for row in report.summary_frame().itertuples(index=False):
        table.add_row(
            str(row.statistic),
            f"{row.empirical:.4f}",
            f"{row.theoretical:.4f}",
            f"{row.difference:+.4f}",
        )
    return table


def _print_t_test(report: CLTReport, alpha: float) -> None:
    result = report.t_test
    kind = "pooled" if result.equal_var else "Welch"
    console.print(
        f"\n[bold]Two-sample t-test ({kind})[/bold]: "
        f"t = {result.statistic:.4f}, df = {result.df:.1f}, p = {result.p_value:.4f}"
    )
    if result.rejects(alpha):
        console.print(f"[red]Reject[/red] the normal approximation at alpha = {alpha}.")
    else:
        console.print(f"[green]Fail to reject[/green] the normal approximation at alpha = {alpha}.")


@app.command()
def run(
    rate: Optional[float] = typer.Option(None, help="Exponential rate parameter (lambda)."),
    samples: Optional[int] = typer.Option(None, help="Draws averaged into each sample mean."),
    simulations: Optional[int] = typer.Option(None, help="Number of simulated sample means."),
    seed: Optional[int] = typer.Option(None, help="Seed for the random generator."),
    welch: bool = typer.Option(False, "--welch", help="Use Welch's unequal-variance t-test."),
    alpha: float = typer.Option(0.05, help="Significance level for the t-test verdict."),
    output_dir: Optional[Path] = typer.Option(None, help="Directory for report exports."),
    export: bool = typer.Option(False, help="Write summary JSON and CSV tables."),
    plots: bool = typer.Option(False, help="Also render histogram and CDF figures."),
    timestamped: bool = typer.Option(
        False, help="Write artefacts into a run_YYYYmmdd_HHMMSS subdirectory."
    ),
    run_label: Optional[str] = typer.Option(
        None, help="Subdirectory name for a timestamped run (implies --timestamped)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline progress."),
) -> None:
    """Simulate sample means and compare them with the CLT prediction."""
    _configure_logging(verbose)
    engine = _build_engine(rate, samples, simulations, seed, welch)
    try:
        report = engine.run()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    params = report.parameters
    console.print(
        f"rate = {params.rate}, samples = {params.n_samples}, "
        f"simulations = {params.n_simulations}, seed = {params.seed}"
    )
    console.print(_build_summary_table(report))
    _print_t_test(report, alpha)
    for warning in report.validation.get("warnings", []):
        console.print(f"[yellow]warning:[/yellow] {warning}")

    if export or plots:
        reporter = ReportGenerator(
            output_dir or config.output_dir(),
            timestamped=timestamped or run_label is not None,
            run_label=run_label,
        )
        paths = reporter.export_all(report, plots=plots)
        console.print("\n[bold green]Artefacts written:[/bold green]")
        for name, path in paths.items():
            console.print(f"  - {name}: {path}")


@app.command()
def convergence(
    rate: Optional[float] = typer.Option(None, help="Exponential rate parameter (lambda)."),
    simulations: Optional[int] = typer.Option(None, help="Simulations per sample size."),
    seed: Optional[int] = typer.Option(None, help="Seed for the random generator."),
    sizes: Optional[List[int]] = typer.Option(
        None, "--size", help="Sample size to evaluate (repeatable)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline progress."),
) -> None:
    """Show how sample-mean statistics approach theory as sample size grows."""
    _configure_logging(verbose)
    engine = _build_engine(rate, None, simulations, seed, welch=False)
    try:
        frame = engine.convergence_study(sizes or None)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    table = Table(title="Convergence of Sample Means", show_lines=False)
    for column in ("n", "Mean", "Theory", "Variance", "Theory", "|Δ mean|", "|Δ var|"):
        table.add_column(column, justify="right")
    for row in frame.itertuples(index=False):
        table.add_row(
            f"{row.n_samples}",
            f"{row.empirical_mean:.4f}",
            f"{row.theoretical_mean:.4f}",
            f"{row.empirical_variance:.4f}",
            f"{row.theoretical_variance:.4f}",
            f"{row.mean_abs_error:.4f}",
            f"{row.variance_abs_error:.4f}",
        )
    console.print(table)


def main() -> None:
    """Entry point for CLI execution."""
    app()


if __name__ == "__main__":
    main()
