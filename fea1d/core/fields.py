"""
Analytic nodal fields on [0, 1].

Each field comes with its exact derivative so the interpolant and its slope
can be compared against the true solution.
"""

from __future__ import annotations

import math

import numpy as np


# -----------------------------
# Fields
# -----------------------------

def field_linear(x):
    """u(x) = x, reproduced exactly by linear elements"""
    return np.asarray(x, dtype=float).copy()

def dfield_linear(x):
    return np.ones_like(np.asarray(x, dtype=float))

def field_quadratic(x):
    """u(x) = x^2"""
    return np.asarray(x, dtype=float) ** 2

def dfield_quadratic(x):
    return 2.0 * np.asarray(x, dtype=float)

def field_sine(x):
    """u(x) = sin(2*pi*x)"""
    return np.sin(2 * math.pi * np.asarray(x, dtype=float))

def dfield_sine(x):
    return 2 * math.pi * np.cos(2 * math.pi * np.asarray(x, dtype=float))


FIELDS = ("linear", "quadratic", "sine")


def get_field_config(field: str):
    """
    Get value and derivative functions for a predefined field.

    Args:
        field: Field name ("linear", "quadratic", "sine")

    Returns:
        tuple: (u_fn, du_fn)
    """
    if field == "linear":
        return field_linear, dfield_linear
    elif field == "quadratic":
        return field_quadratic, dfield_quadratic
    elif field == "sine":
        return field_sine, dfield_sine
    else:
        raise ValueError(f"Unknown field: {field}")
