"""Type-construction-time choices shared by every vector class."""
from __future__ import annotations

from typing import Dict

from .layouts import Vector2Base, Vector3Base, Vector4Base, VectorBase

_SPECIALISED_LAYOUTS: Dict[int, type] = {
    2: Vector2Base,
    3: Vector3Base,
    4: Vector4Base,
}


# //1.- Bound cross-size operations to the shared prefix of both operands.
def min_size(size1: int, size2: int) -> int:
    return size2 if size1 > size2 else size1


# //2.- Bind dimensions 2, 3 and 4 to their named layouts, everything else to the generic one.
def select_base_layout(size: int) -> type:
    return _SPECIALISED_LAYOUTS.get(size, VectorBase)


# //3.- Reject a fixed-arity construction whose argument count differs from the dimension.
def check_arity(size: int, given: int, type_name: str) -> None:
    if given != size:
        noun = "component" if size == 1 else "components"
        raise TypeError(f"{type_name} takes exactly {size} {noun} ({given} given)")
