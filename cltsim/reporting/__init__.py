"""Persist simulation reports to disk."""

from .report_generator import ReportGenerator

__all__ = ["ReportGenerator"]
