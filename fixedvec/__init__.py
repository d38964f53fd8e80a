"""Fixed-size numeric vectors.

Concrete vector classes are specialised per dimension and scalar kind.
Two, three and four component vectors expose named ``x``/``y``/``z``/``w``
components; two and three component vectors add cross products.
"""

from .config import VectorSettings, load_vector_settings
from .dispatch import check_arity, min_size, select_base_layout
from .layouts import Vector2Base, Vector3Base, Vector4Base, VectorBase
from .operators import ArrayOperator, array_operator
from .vector import (
    Vector,
    Vector2,
    Vector2d,
    Vector2i,
    Vector3,
    Vector3d,
    Vector3i,
    Vector4,
    Vector4d,
    Vector4i,
    cross,
    dot,
    format_vector,
    vector_type,
)

__all__ = [
    "Vector",
    "vector_type",
    "Vector2",
    "Vector3",
    "Vector4",
    "Vector2d",
    "Vector3d",
    "Vector4d",
    "Vector2i",
    "Vector3i",
    "Vector4i",
    "dot",
    "cross",
    "format_vector",
    "VectorBase",
    "Vector2Base",
    "Vector3Base",
    "Vector4Base",
    "ArrayOperator",
    "array_operator",
    "min_size",
    "select_base_layout",
    "check_arity",
    "VectorSettings",
    "load_vector_settings",
]
