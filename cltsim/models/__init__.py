"""Pydantic data models for simulation inputs and results."""

from .parameters import SimulationParameters
from .results import CLTReport, SampleMeanSummary, TheoreticalMoments, TTestResult

__all__ = [
    "CLTReport",
    "SampleMeanSummary",
    "SimulationParameters",
    "TTestResult",
    "TheoreticalMoments",
]
