"""
Experiment orchestration: refinement sweeps and config-driven pipelines.
"""
from .sweep_convergence import estimate_rate, interp_errors, sweep

__all__ = ["estimate_rate", "interp_errors", "sweep"]
