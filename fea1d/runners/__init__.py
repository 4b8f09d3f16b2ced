"""
Command-line runners for individual mesh interpolation runs.
"""
from .run_mesh import run_mesh

__all__ = ["run_mesh"]
