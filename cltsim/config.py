"""Runtime defaults with environment variable overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .models.parameters import SimulationParameters

DEFAULT_RATE = 0.2
DEFAULT_SAMPLES = 40
DEFAULT_SIMULATIONS = 1000
DEFAULT_SEED = 2015
DEFAULT_OUTPUT_DIR = Path("output")
DEFAULT_LOG_LEVEL = "WARNING"

ENV_PREFIX = "CLTSIM_"


def _env(name: str) -> Optional[str]:
    value = os.environ.get(f"{ENV_PREFIX}{name}")
    if value is None or not value.strip():
        return None
    return value.strip()


def env_float(name: str, default: float) -> float:
    """Read a float override, falling back to ``default`` when unset."""
    raw = _env(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from exc


def env_int(name: str, default: Optional[int]) -> Optional[int]:
    """Read an integer override, falling back to ``default`` when unset."""
    raw = _env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


def output_dir() -> Path:
    raw = _env("OUTPUT_DIR")
    return Path(raw) if raw else DEFAULT_OUTPUT_DIR


def log_level() -> str:
    return (_env("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def default_parameters() -> SimulationParameters:
    """Return validated simulation parameters honouring environment overrides."""
    return SimulationParameters(
        rate=env_float("RATE", DEFAULT_RATE),
        n_samples=env_int("SAMPLES", DEFAULT_SAMPLES),
        n_simulations=env_int("SIMULATIONS", DEFAULT_SIMULATIONS),
        seed=env_int("SEED", DEFAULT_SEED),
    )
