from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass
class Element:
    """
    Linear two-node element on the unit interval.

    Plain record filled in by ``Mesh.initialize_element``; the mesh does not
    keep track of elements, callers store them (usually in a list indexed by
    ``id``).

    Args:
        id: Cardinal element index
        n1: Global coordinate of the left endpoint
        n2: Global coordinate of the right endpoint
        ind1: Global node index of the left endpoint
        ind2: Global node index of the right endpoint (ind1 + 1)
        k: 2x2 local stiffness matrix
    """
    id: int = 0
    n1: float = 0.0
    n2: float = 0.0
    ind1: int = 0
    ind2: int = 0
    k: np.ndarray = field(default_factory=lambda: np.zeros((2, 2)))
