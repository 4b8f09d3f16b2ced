"""
Core reusable components: mesh, element record, analytic fields, shared utilities.
Import from here in most code to avoid long relative imports.
"""
from .element import Element
from .fields import FIELDS, get_field_config
from .mesh import Mesh, MeshConfig, interpolate_1d
from .utils import IndexOutOfRange, InvalidArgument, PreconditionViolation, l2_error

__all__ = [
    "Element",
    "Mesh", "MeshConfig", "interpolate_1d",
    "FIELDS", "get_field_config",
    "InvalidArgument", "PreconditionViolation", "IndexOutOfRange", "l2_error",
]
