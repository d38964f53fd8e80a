"""Fixed-size vector value type.

A concrete vector class is built once for each (dimension, scalar kind,
index policy) triple by :func:`vector_type`, or with the subscript
shorthand ``Vector[3, "float64"]``. The build step resolves everything
that depends on the dimension: the storage layout to mix in (named
``x``/``y``/``z``/``w`` accessors and cross products for 2, 3 and 4
components), the elementwise operator bound to the dimension, and the
exact number of components the constructor accepts.

Binary operations between vectors of different dimension or scalar kind
act only on the shared prefix of both operands. Components beyond that
prefix in the larger operand are left untouched, and results always
take the left operand's class:

>>> a = Vector3(1, 2, 3)
>>> b = Vector2(10, 20)
>>> str(a + b)
'3[ 11.0 22.0 3.0 ]'
"""
from __future__ import annotations

import logging
import numbers
import operator
from functools import lru_cache
from typing import Iterable, Iterator, Optional, Sequence

import numpy as np

from .config import VectorSettings, load_vector_settings, resolve_scalar
from .dispatch import check_arity, min_size, select_base_layout
from .layouts import Vector2Base, Vector3Base, component_buffer
from .operators import array_operator
from .scalar_math import sqrt

LOGGER = logging.getLogger(__name__)

SETTINGS = load_vector_settings()

_SUFFIXES = {"float32": "f", "float64": "d", "int32": "i", "int64": "l"}


def _is_scalar(value) -> bool:
    return isinstance(value, (numbers.Number, np.number)) and not isinstance(value, Vector)


class Vector:
    """Vector of ``size`` components of a single numeric scalar kind.

    Use :func:`vector_type` (or ``Vector[size, scalar]``) to obtain a
    concrete class; this base class cannot be instantiated itself.
    Concrete classes accept either no arguments (all components zero)
    or exactly ``size`` component values.
    """

    __slots__ = ("_data",)

    size: int = 0
    dtype: Optional[np.dtype] = None
    index_policy: str = "clamp"

    # Let numpy scalars on the left defer to the reflected operators.
    __array_ufunc__ = None

    __hash__ = None  # mutable value type

    def __class_getitem__(cls, params):
        if not isinstance(params, tuple):
            params = (params,)
        return vector_type(*params)

    def __init__(self, *components) -> None:
        cls = type(self)
        if cls.dtype is None:
            raise TypeError("Vector must be specialised first, e.g. Vector[3, float] or vector_type(3)")
        self._data = component_buffer(cls.size, cls.dtype)
        if components:
            check_arity(cls.size, len(components), cls.__name__)
            self._data[:] = components

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def zero(cls) -> "Vector":
        return cls()

    @classmethod
    def create(cls, values: Iterable) -> "Vector":
        """Build a vector from exactly ``size`` component values."""
        if not isinstance(values, (np.ndarray, Sequence)):
            values = list(values)
        array = np.asarray(values)
        if array.ndim != 1:
            raise TypeError(f"{cls.__name__}.create expects a flat sequence of components")
        check_arity(cls.size, array.shape[0], cls.__name__)
        vector = cls()
        vector._data[:] = array
        return vector

    @classmethod
    def _wrap(cls, buffer: np.ndarray) -> "Vector":
        vector = cls.__new__(cls)
        vector._data = buffer
        return vector

    def copy(self) -> "Vector":
        return type(self)._wrap(self._data.copy())

    def __copy__(self) -> "Vector":
        return self.copy()

    def __deepcopy__(self, memo) -> "Vector":
        return self.copy()

    def convert(self, target: type) -> "Vector":
        """Return a ``target`` vector holding this vector's shared prefix.

        Components of ``target`` past this vector's size stay zero.
        """
        if not (isinstance(target, type) and issubclass(target, Vector)) or target.dtype is None:
            raise TypeError(f"convert expects a specialised vector class, got {target!r}")
        result = target()
        array_operator(min_size(target.size, self.size)).set(result._data, self._data)
        return result

    # ------------------------------------------------------------------
    # Component access
    # ------------------------------------------------------------------
    def data(self, readonly: bool = False) -> np.ndarray:
        """Expose the component buffer.

        The writable form is the live buffer, so writes through it are
        writes to the vector. ``readonly=True`` returns a non-writable
        view of the same memory.
        """
        if not readonly:
            return self._data
        view = self._data.view()
        view.flags.writeable = False
        return view

    def get(self, index: int):
        """Return component ``index``, applying the class index policy when out of range.

        With the ``"clamp"`` policy an out-of-range index yields the
        scalar kind's zero; with ``"raise"`` it raises ``IndexError``.
        """
        index = operator.index(index)
        if 0 <= index < self.size:
            return self._data[index]
        if self.index_policy == "raise":
            raise IndexError(f"{type(self).__name__} index {index} out of range [0, {self.size})")
        return self.dtype.type(0)

    def __getitem__(self, index: int):
        return self._data[operator.index(index)]

    def __setitem__(self, index: int, value) -> None:
        self._data[operator.index(index)] = value

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator:
        return iter(self._data.copy())

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def set(self, other: "Vector") -> None:
        """Copy the shared prefix of ``other`` into this vector."""
        self._shared(other).set(self._data, other._data)

    def assign(self, other: "Vector") -> "Vector":
        """Like :meth:`set`, returning ``self`` for chaining."""
        if other is not self:
            self.set(other)
        return self

    # ------------------------------------------------------------------
    # Magnitude, normalisation and products
    # ------------------------------------------------------------------
    def sqrt_magnitude(self):
        """Sum of the squared components (no square root taken)."""
        return self._operator().sqrt_magnitude(self._data)

    def magnitude(self):
        return sqrt(self.sqrt_magnitude())

    def normalize(self) -> "Vector":
        """Return a unit-length copy. A zero vector divides by zero natively."""
        buffer = self._data.copy()
        self._operator().normalize(buffer, self.magnitude())
        return type(self)._wrap(buffer)

    def normalize_this(self) -> "Vector":
        self._operator().normalize(self._data, self.magnitude())
        return self

    def dot(self, other: "Vector"):
        return dot(self, other)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._shared(other).equals(self._data, other._data)

    def __ne__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return not self._shared(other).equals(self._data, other._data)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def __neg__(self) -> "Vector":
        buffer = self._data.copy()
        self._operator().negate(buffer)
        return type(self)._wrap(buffer)

    def __add__(self, other) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        buffer = self._data.copy()
        self._shared(other).add(buffer, other._data)
        return type(self)._wrap(buffer)

    def __iadd__(self, other) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._shared(other).add(self._data, other._data)
        return self

    def __sub__(self, other) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        buffer = self._data.copy()
        self._shared(other).sub(buffer, other._data)
        return type(self)._wrap(buffer)

    def __isub__(self, other) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._shared(other).sub(self._data, other._data)
        return self

    def __mul__(self, other):
        # Vector * vector is the dot product; scalars scale every component.
        if isinstance(other, Vector):
            return dot(self, other)
        if not _is_scalar(other):
            return NotImplemented
        buffer = self._data.copy()
        self._operator().mul(buffer, other)
        return type(self)._wrap(buffer)

    def __rmul__(self, other) -> "Vector":
        if not _is_scalar(other):
            return NotImplemented
        return self.__mul__(other)

    def __imul__(self, other) -> "Vector":
        if not _is_scalar(other):
            return NotImplemented
        self._operator().mul(self._data, other)
        return self

    def __truediv__(self, other) -> "Vector":
        if not _is_scalar(other):
            return NotImplemented
        buffer = self._data.copy()
        self._operator().div(buffer, other)
        return type(self)._wrap(buffer)

    def __itruediv__(self, other) -> "Vector":
        if not _is_scalar(other):
            return NotImplemented
        self._operator().div(self._data, other)
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return format_vector(self)

    def __repr__(self) -> str:
        values = ", ".join(repr(value.item()) for value in self._data)
        return f"{type(self).__name__}({values})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    @classmethod
    def _operator(cls):
        return array_operator(cls.size)

    def _shared(self, other: "Vector"):
        return array_operator(min_size(self.size, other.size))


def _class_name(size: int, dtype: np.dtype) -> str:
    suffix = _SUFFIXES.get(dtype.name)
    if suffix is None:
        return f"Vector{size}_{dtype.name}"
    return f"Vector{size}{suffix}"


@lru_cache(maxsize=None)
def _build_vector_type(size: int, dtype: np.dtype, index_policy: str) -> type:
    base = select_base_layout(size)
    name = _class_name(size, dtype)
    namespace = {
        "__slots__": (),
        "__module__": __name__,
        "__doc__": f"{size}-component vector of {dtype.name} values.",
        "size": size,
        "dtype": dtype,
        "index_policy": index_policy,
    }
    cls = type(name, (Vector, base), namespace)
    LOGGER.debug(
        "Specialised %s: size=%d dtype=%s layout=%s index_policy=%s",
        name,
        size,
        dtype.name,
        base.__name__,
        index_policy,
    )
    return cls


def vector_type(
    size: int,
    scalar=None,
    *,
    index_policy: Optional[str] = None,
    settings: Optional[VectorSettings] = None,
) -> type:
    """Return the concrete vector class for ``size`` components of ``scalar``.

    ``scalar`` and ``index_policy`` fall back to ``settings``, or to the
    settings loaded from the environment at import when none are given.
    Classes are cached, so equal arguments always yield the same class.
    """
    size = operator.index(size)
    if size < 1:
        raise ValueError(f"Vector size must be positive, got {size}")
    defaults = SETTINGS if settings is None else settings
    dtype = defaults.scalar_dtype if scalar is None else resolve_scalar(scalar)
    policy = defaults.index_policy if index_policy is None else index_policy
    if policy not in ("clamp", "raise"):
        raise ValueError(f"Unknown index policy: {policy!r}")
    return _build_vector_type(size, dtype, policy)


def dot(a: Vector, b: Vector):
    """Dot product over the shared prefix, in ``a``'s scalar kind."""
    return array_operator(min_size(a.size, b.size)).dot(a._data, b._data)


def cross(a: Vector, b: Vector):
    """Cross product: a scalar for two components, a new vector for three."""
    if isinstance(a, (Vector2Base, Vector3Base)):
        return a.cross(b)
    raise TypeError(f"cross product is defined for 2- and 3-component vectors, got {type(a).__name__}")


def format_vector(vector: Vector) -> str:
    """Render as the size followed by each component, e.g. ``3[ 1 2 3 ]``."""
    parts = " ".join(str(value) for value in vector.to_numpy())
    return f"{vector.size}[ {parts} ]"


Vector2 = vector_type(2)
Vector3 = vector_type(3)
Vector4 = vector_type(4)

Vector2d = vector_type(2, np.float64)
Vector3d = vector_type(3, np.float64)
Vector4d = vector_type(4, np.float64)

Vector2i = vector_type(2, np.int32)
Vector3i = vector_type(3, np.int32)
Vector4i = vector_type(4, np.int32)
