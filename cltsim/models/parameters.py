"""Simulation parameter model."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SimulationParameters(BaseModel):
    """Inputs for one exponential sample-mean simulation run."""

    model_config = ConfigDict(frozen=True)

    rate: float = Field(0.2, gt=0, allow_inf_nan=False, description="Exponential rate parameter (lambda).")
    n_samples: int = Field(40, ge=1, description="Draws averaged into each sample mean.")
    n_simulations: int = Field(1000, ge=1, description="Number of simulated sample means.")
    seed: Optional[int] = Field(
        2015, description="Seed for the pseudorandom generator; None draws fresh entropy."
    )

    @field_validator("seed")
    @classmethod
    def _non_negative_seed(cls, value: Optional[int]) -> Optional[int]:
        """numpy's SeedSequence rejects negative seeds."""
        if value is not None and value < 0:
            raise ValueError("seed must be non-negative")
        return value

    @property
    def population_mean(self) -> float:
        return 1.0 / self.rate

    def to_metadata(self) -> Dict[str, object]:
        """Serialise into a plain dictionary for persistence."""
        return {
            "rate": float(self.rate),
            "n_samples": int(self.n_samples),
            "n_simulations": int(self.n_simulations),
            "seed": self.seed,
        }

    @classmethod
    def from_metadata(cls, metadata: Dict[str, Any]) -> "SimulationParameters":
        """Rehydrate parameters from persisted metadata, filling defaults."""
        seed = metadata.get("seed", 2015)
        return cls(
            rate=float(metadata.get("rate", 0.2)),
            n_samples=int(metadata.get("n_samples", 40)),
            n_simulations=int(metadata.get("n_simulations", 1000)),
            seed=None if seed is None else int(seed),
        )
