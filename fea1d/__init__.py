"""
Top-level package for the 1D finite-element mesh project.
Exposes subpackages: core, runners, experiments, visualization.
"""
from . import core, runners, experiments, visualization

__all__ = ["core", "runners", "experiments", "visualization"]
