"""
Utility functions and error types for the 1D mesh core.

Provides the exception hierarchy used to report contract violations and bad
construction arguments, the contract check helper, and error metrics shared by
the runners and experiments.
"""

from __future__ import annotations

import numpy as np


class InvalidArgument(ValueError):
    """Raised when a mesh is constructed from an invalid element count."""


class PreconditionViolation(AssertionError):
    """
    A caller broke the contract of a mesh query.

    These are programmer errors, not recoverable conditions. Like ``assert``,
    the checks that raise them are skipped when Python runs with ``-O``.
    """


class IndexOutOfRange(PreconditionViolation):
    """A node, element or DOF index outside the mesh numbering."""


def require(cond: bool, msg: str, exc: type = PreconditionViolation) -> None:
    if __debug__ and not cond:
        raise exc(msg)


def l2_error(u_pred: np.ndarray, u_ref: np.ndarray) -> float:
    return float(np.sqrt(np.mean((u_pred - u_ref) ** 2)))
