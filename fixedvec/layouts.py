"""Storage layouts mixed into every concrete vector class.

A vector always owns a single component buffer (a one-dimensional
numpy array created by :func:`component_buffer`). The layouts below
never add storage of their own: the generic layout exposes only the
indexable buffer, while the specialised layouts for two, three and four
components publish named accessors that read and write fixed buffer
positions (``x`` is index 0, ``y`` index 1, ``z`` index 2, ``w`` index
3). Because both views resolve to the same buffer slot, indexed and
named access can never disagree, whatever mutation path was taken.
"""
from __future__ import annotations

import numpy as np


def component_buffer(size: int, dtype: np.dtype) -> np.ndarray:
    """Allocate a zero-filled buffer of ``size`` components."""
    return np.zeros(size, dtype=dtype)


class Component:
    """Named accessor bound to one position of the owning vector's buffer."""

    __slots__ = ("index", "name")

    def __init__(self, index: int) -> None:
        self.index = index
        self.name = ""

    def __set_name__(self, owner, name: str) -> None:
        self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance._data[self.index]

    def __set__(self, instance, value) -> None:
        instance._data[self.index] = value


class VectorBase:
    """Generic layout: the indexable buffer and nothing else."""

    __slots__ = ()

    components: tuple = ()


class Vector2Base(VectorBase):
    """Two-component layout with ``x``/``y`` and the scalar cross product."""

    __slots__ = ()

    components = ("x", "y")
    x = Component(0)
    y = Component(1)

    @staticmethod
    def cross_product(vector: "Vector2Base", rhs: "Vector2Base"):
        """Signed area spanned by ``vector`` and ``rhs`` (the 2-D determinant)."""
        _require_layout(vector, Vector2Base, "2-D cross product")
        _require_layout(rhs, Vector2Base, "2-D cross product")
        return vector.dtype.type(vector.x * rhs.y - vector.y * rhs.x)

    def cross(self, rhs: "Vector2Base"):
        return Vector2Base.cross_product(self, rhs)


class Vector3Base(VectorBase):
    """Three-component layout with ``x``/``y``/``z`` and the vector cross product."""

    __slots__ = ()

    components = ("x", "y", "z")
    x = Component(0)
    y = Component(1)
    z = Component(2)

    @staticmethod
    def cross_in_place(vector: "Vector3Base", rhs: "Vector3Base") -> None:
        """Overwrite ``vector`` with ``vector x rhs``.

        All three products are computed from the original components
        before any of them is written back.
        """
        _require_layout(vector, Vector3Base, "3-D cross product")
        _require_layout(rhs, Vector3Base, "3-D cross product")
        x = vector.y * rhs.z - vector.z * rhs.y
        y = vector.z * rhs.x - vector.x * rhs.z
        z = vector.x * rhs.y - vector.y * rhs.x
        vector.x = x
        vector.y = y
        vector.z = z

    def cross(self, rhs: "Vector3Base"):
        """Return ``self x rhs`` as a new vector."""
        result = self.copy()
        Vector3Base.cross_in_place(result, rhs)
        return result

    def cross_this(self, rhs: "Vector3Base"):
        """Replace ``self`` with ``self x rhs`` and return ``self``."""
        Vector3Base.cross_in_place(self, rhs)
        return self


class Vector4Base(VectorBase):
    """Four-component layout with ``x``/``y``/``z``/``w``."""

    __slots__ = ()

    components = ("x", "y", "z", "w")
    x = Component(0)
    y = Component(1)
    z = Component(2)
    w = Component(3)


def _require_layout(value, layout: type, operation: str) -> None:
    if not isinstance(value, layout):
        raise TypeError(f"{operation} requires a {layout.__name__} operand, got {type(value).__name__}")
