"""
Visualization utilities for mesh interpolation.

Provides plotting and animation of interpolants, shape functions and
refinement convergence.

Key Exports:
    plot_interpolant: Interpolant vs exact field and pointwise error
    plot_shape_functions: Linear basis on the reference element
    plot_metrics: Convergence of L2 errors against element width
    animate_refinement: Interpolant evolution under mesh refinement
"""

from .animate_refinement import animate_refinement
from .plot import plot_interpolant, plot_shape_functions
from .plot_metrics import plot_metrics

__all__ = ["animate_refinement", "plot_interpolant", "plot_shape_functions", "plot_metrics"]
