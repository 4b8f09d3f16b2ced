import numpy as np
import pytest

from fea1d.core import IndexOutOfRange, InvalidArgument, Mesh


def test_mesh_sizes():
    """Test node count, element count and width for several element counts."""
    for n in (1, 2, 3, 4, 7, 10, 64):
        mesh = Mesh(n)
        assert mesh.total_num_nodes() == n + 1
        assert mesh.total_num_elements() == n
        assert mesh.get_element_width() == 1.0 / n
        assert mesh.num_nodes == n + 1
        assert mesh.num_elements == n
        assert mesh.element_width > 0


def test_invalid_element_count():
    """Test that non-positive or non-integer element counts are rejected."""
    for bad in (0, -1, -10, 2.5, "4", True):
        with pytest.raises(InvalidArgument):
            Mesh(bad)
    assert issubclass(InvalidArgument, ValueError)


def test_numpy_integer_element_count():
    mesh = Mesh(np.int64(4))
    assert mesh.total_num_elements() == 4
    assert isinstance(mesh.total_num_nodes(), int)


def test_node_coordinates():
    """Test that node i sits at i/n."""
    n = 5
    mesh = Mesh(n)
    for i in range(mesh.total_num_nodes()):
        assert np.isclose(mesh.node_coordinate(i), i / n)
    assert np.allclose(mesh.node_coordinates(), np.arange(n + 1) / n)
    assert mesh.node_coordinate(0) == 0.0


def test_node_coordinate_out_of_range():
    """Test that node ids outside [0, num_nodes) violate the contract."""
    mesh = Mesh(4)
    with pytest.raises(IndexOutOfRange):
        mesh.node_coordinate(mesh.total_num_nodes())
    with pytest.raises(IndexOutOfRange):
        mesh.node_coordinate(-1)
    assert issubclass(IndexOutOfRange, AssertionError)


def test_element_coordinates():
    """Test element endpoints and that every element has the mesh width."""
    n = 8
    mesh = Mesh(n)
    for e in range(mesh.total_num_elements()):
        n1, n2 = mesh.element_coordinates(e)
        assert np.isclose(n1, e / n)
        assert np.isclose(n2, (e + 1) / n)
        assert np.isclose(n2 - n1, mesh.get_element_width())
        assert n1 < n2


def test_element_coordinates_out_of_range():
    mesh = Mesh(4)
    with pytest.raises(IndexOutOfRange):
        mesh.element_coordinates(4)
    with pytest.raises(IndexOutOfRange):
        mesh.element_coordinates(-1)


def test_concrete_four_element_mesh():
    mesh = Mesh(4)
    assert mesh.get_element_width() == 0.25
    assert mesh.locate_x(0.6) == 2
    assert mesh.element_coordinates(2) == (0.5, 0.75)


def test_boundary_nodes_hold_node_count():
    """The recorded boundary entry is the node count, not a node index."""
    mesh = Mesh(4)
    assert mesh.boundary_nodes == (5,)


def test_mesh_is_read_only():
    mesh = Mesh(4)
    with pytest.raises(AttributeError):
        mesh.num_elements = 8
    with pytest.raises(AttributeError):
        mesh.element_width = 0.5
    assert mesh.total_num_elements() == 4


if __name__ == "__main__":
    test_mesh_sizes()
    test_node_coordinates()
    test_element_coordinates()
    test_concrete_four_element_mesh()
    print("✅ Mesh tests passed.")
