"""Numerical core: sampling, aggregation, empirical CDF and hypothesis tests."""

from .aggregation import (
    compute_sample_means,
    quantile_table,
    summarize_sample_means,
    theoretical_moments,
)
from .ecdf import EmpiricalCDF
from .hypothesis import compare_to_theory, two_sample_t_test
from .sampling import generate_exponential_batch
from .validation import ValidationResult, validate_sample_means
from .validator import ParameterError

__all__ = [
    "EmpiricalCDF",
    "ParameterError",
    "ValidationResult",
    "compare_to_theory",
    "compute_sample_means",
    "generate_exponential_batch",
    "quantile_table",
    "summarize_sample_means",
    "theoretical_moments",
    "two_sample_t_test",
    "validate_sample_means",
]
