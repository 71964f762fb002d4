"""Seeded exponential sample generation."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .validator import ParameterError, validate_count, validate_rate

LOGGER = logging.getLogger(__name__)


def generate_exponential_batch(
    rate: float,
    n_samples: int,
    n_simulations: int,
    *,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    Draw an (n_simulations x n_samples) matrix of Exponential(rate) values.

    Parameters
    ----------
    rate:
        Rate parameter lambda; numpy parameterises by scale ``1 / rate``.
    n_samples:
        Number of draws per simulation (columns).
    n_simulations:
        Number of simulations (rows).
    seed:
        Seed for ``numpy.random.default_rng``. Ignored when ``rng`` is given.
    rng:
        Pre-built generator, for callers that chain several draws.

    The returned array is read-only.
    """
    rate = validate_rate(rate)
    n_samples = validate_count(n_samples, "n_samples")
    n_simulations = validate_count(n_simulations, "n_simulations")
    if rng is not None and seed is not None:
        raise ParameterError("Pass either seed or rng, not both.")

    generator = rng if rng is not None else np.random.default_rng(seed)
    batch = generator.exponential(scale=1.0 / rate, size=(n_simulations, n_samples))
    batch.setflags(write=False)
    LOGGER.debug(
        "Generated exponential batch rate=%s shape=%s seed=%s", rate, batch.shape, seed
    )
    return batch
