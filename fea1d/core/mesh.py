"""
Uniform 1D mesh of linear elements on [0, 1].

Provides node and element geometry, point location, the affine map between an
element and the reference interval [-1, 1], linear shape functions, element
initialization and reconstruction of a nodal field at arbitrary points.

Reference element:

    -1 ----------- 1
    N0 = (1 - r)/2      N1 = (1 + r)/2
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

import numpy as np

from .element import Element
from .utils import IndexOutOfRange, InvalidArgument, require


@dataclass
class MeshConfig:
    N: int = 32
    n_samples: int = 257


class Mesh:
    """
    Uniform mesh of ``n`` linear elements spanning [0, 1].

    Read-only after construction, so queries from several threads are safe.
    Node ``i`` sits at ``i * element_width`` and element ``e`` spans nodes
    ``e`` and ``e + 1``.

    Args:
        n: Number of elements (positive integer)

    Raises:
        InvalidArgument: If ``n`` is not a positive integer
    """
    def __init__(self, n: int):
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise InvalidArgument(f"element count must be an integer, got {n!r}")
        if n <= 0:
            raise InvalidArgument(f"element count must be positive, got {n}")

        self._num_nodes = int(n) + 1
        self._num_elements = int(n)
        self._element_width = 1.0 / n

        # Holds the node count, not a node index (the last node is num_nodes - 1).
        self._boundary_nodes = [self._num_nodes]

    def __repr__(self) -> str:
        return f"Mesh(n={self._num_elements})"

    @property
    def num_nodes(self) -> int:
        return self._num_nodes

    @property
    def num_elements(self) -> int:
        return self._num_elements

    @property
    def element_width(self) -> float:
        return self._element_width

    @property
    def boundary_nodes(self) -> Tuple[int, ...]:
        return tuple(self._boundary_nodes)

    # -----------------------------
    # Basic queries
    # -----------------------------

    def total_num_elements(self) -> int:
        return self._num_elements

    def total_num_nodes(self) -> int:
        return self._num_nodes

    def get_element_width(self) -> float:
        return self._element_width

    def node_coordinate(self, node_id: int) -> float:
        """Global coordinate of node ``node_id`` (0 <= node_id < num_nodes)."""
        require(0 <= node_id < self._num_nodes,
                f"node id {node_id} outside [0, {self._num_nodes})", IndexOutOfRange)
        return node_id * self._element_width

    def node_coordinates(self) -> np.ndarray:
        """Coordinates of every node, in global node order."""
        return np.arange(self._num_nodes) * self._element_width

    def element_coordinates(self, element_id: int) -> Tuple[float, float]:
        """Left and right endpoint coordinates of element ``element_id``."""
        require(0 <= element_id < self._num_elements,
                f"element id {element_id} outside [0, {self._num_elements})", IndexOutOfRange)
        return self.node_coordinate(element_id), self.node_coordinate(element_id + 1)

    # -----------------------------
    # Elements
    # -----------------------------

    def initialize_element(self, element_id: int) -> Element:
        """
        Build the element with cardinal index ``element_id``.

        The local stiffness matrix is

            k = [[ 1/h,    -val/h],
                 [-val/h,   val/h]]

        with ``val = 0`` for the element whose right endpoint is exactly 1.0
        and ``val = 1`` otherwise, so the last element only keeps k[0][0].
        """
        n1, n2 = self.element_coordinates(element_id)

        h = n2 - n1
        val = 0.0 if n2 == 1.0 else 1.0
        k = np.array([[1.0 / h, -val / h],
                      [-val / h, val / h]])

        return Element(id=element_id, n1=n1, n2=n2,
                       ind1=element_id, ind2=element_id + 1, k=k)

    def initialize_elements(self) -> List[Element]:
        """All elements of the mesh, indexed by element id."""
        return [self.initialize_element(e) for e in range(self._num_elements)]

    # -----------------------------
    # Point location and mapping
    # -----------------------------

    def locate_x(self, x: float) -> int:
        """
        Index of the element containing ``x`` (expected in [0, 1]).

        The right boundary x == 1.0 belongs to the last element.
        """
        element_id = int(np.floor(x / self._element_width))
        if x == 1.0:
            element_id = self._num_elements - 1

        require(0 <= element_id < self._num_elements,
                f"x={x} located in element {element_id}, outside [0, {self._num_elements})")
        return element_id

    def map_global_to_local_frame(self, x: float, element_id: int) -> float:
        """Map global ``x`` into the [-1, 1] frame of element ``element_id``."""
        require(element_id == np.floor(x / self._element_width)
                or element_id == self._num_elements - 1,
                f"element {element_id} does not contain x={x}")

        ref_coord = (x / self._element_width - element_id) * 2.0 - 1.0

        # x / element_width can round a few ulps past num_elements at x == 1.0
        tol = 4.0 * self._num_elements * np.finfo(float).eps
        if 1.0 < abs(ref_coord) <= 1.0 + tol:
            ref_coord = float(np.copysign(1.0, ref_coord))

        require(-1.0 <= ref_coord <= 1.0,
                f"reference coordinate {ref_coord} outside [-1, 1]")
        return ref_coord

    def map_local_to_global_frame(self, ref_coord: float, n1: float, n2: float) -> float:
        return ((1.0 - ref_coord) * n1 + (1.0 + ref_coord) * n2) / 2.0

    # -----------------------------
    # Shape functions
    # -----------------------------

    def shape_function_values(self, ref_coord):
        """
        Linear Lagrange basis [N0, N1] at ``ref_coord``.

        An array of reference coordinates gives an array of shape (2, m).
        """
        return np.array([(1.0 - ref_coord) / 2.0, (1.0 + ref_coord) / 2.0])

    def shape_function_derivatives(self, ref_coord) -> np.ndarray:
        """
        Returns [-num_elements, num_elements] whatever ``ref_coord`` is.

        This is not the derivative of the basis with respect to ``ref_coord``
        (that would be [-0.5, 0.5]). It equals the global-frame gradient
        [-1/h, 1/h] only because the mesh is uniform with h = 1/num_elements.
        """
        return np.array([-float(self._num_elements), float(self._num_elements)])

    # -----------------------------
    # Reconstruction
    # -----------------------------

    def _element_dofs(self, element_id: int, d: Sequence[float],
                      elements: Sequence[Element]) -> Tuple[float, float]:
        require(element_id < len(elements),
                f"no element at index {element_id} ({len(elements)} given)", IndexOutOfRange)
        require(len(d) >= self._num_nodes,
                f"{len(d)} DOF values given for {self._num_nodes} nodes", IndexOutOfRange)
        e = elements[element_id]
        return d[e.ind1], d[e.ind2]

    def approx_value(self, x: float, d: Sequence[float], elements: Sequence[Element]) -> float:
        """
        Evaluate the finite-element interpolant of nodal values ``d`` at ``x``.

        Args:
            x: Global point in [0, 1]
            d: Nodal values indexed by global node id (at least num_nodes)
            elements: Initialized elements indexed by element id

        Returns:
            d[ind1] * N0 + d[ind2] * N1 on the element containing x
        """
        element_id = self.locate_x(x)
        ref_coord = self.map_global_to_local_frame(x, element_id)
        values = self.shape_function_values(ref_coord)

        d1, d2 = self._element_dofs(element_id, d, elements)
        return float(d1 * values[0] + d2 * values[1])

    def approx_values(self, xs, d: Sequence[float], elements: Sequence[Element]) -> np.ndarray:
        """``approx_value`` at every point of ``xs``; the result has the shape of ``xs``."""
        values = [self.approx_value(float(x), d, elements) for x in np.ravel(xs)]
        return np.array(values).reshape(np.shape(xs))

    def approx_gradient(self, x: float, d: Sequence[float], elements: Sequence[Element]) -> float:
        """Slope of the interpolant on the element containing ``x``."""
        element_id = self.locate_x(x)
        ref_coord = self.map_global_to_local_frame(x, element_id)
        derivatives = self.shape_function_derivatives(ref_coord)

        d1, d2 = self._element_dofs(element_id, d, elements)
        return float(d1 * derivatives[0] + d2 * derivatives[1])


def interpolate_1d(cfg: MeshConfig, field_fn: Callable[[np.ndarray], np.ndarray]):
    """
    Interpolate ``field_fn`` on a mesh of ``cfg.N`` elements.

    Returns:
        x: Sample points, linspace(0, 1, cfg.n_samples)
        u: Interpolant evaluated at x
    """
    if cfg.n_samples < 2:
        raise InvalidArgument(f"need at least 2 samples, got {cfg.n_samples}")

    mesh = Mesh(cfg.N)
    elements = mesh.initialize_elements()
    d = field_fn(mesh.node_coordinates())

    x = np.linspace(0.0, 1.0, cfg.n_samples)
    u = mesh.approx_values(x, d, elements)
    return x, u
