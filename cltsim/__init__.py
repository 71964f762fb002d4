"""Central Limit Theorem simulation of exponential sample means."""

from .engine import CLTEngine, run_simulation

__all__ = ["CLTEngine", "run_simulation"]

__version__ = "0.1.0"
