"""Elementwise operations over fixed-length component buffers.

Each :class:`ArrayOperator` is bound to a single element count when it
is built. Every operation then touches exactly the first ``count``
elements of the buffers it receives, handing the whole span to a numpy
ufunc instead of iterating element by element in Python. Operators are
cached per count, so a vector class resolves the operator it needs once
and reuses it for every call.

Results are always written back in the destination buffer's scalar
kind. The arithmetic itself runs in numpy's promoted type of the two
operands; the store uses an unsafe cast, so an integer destination
truncates toward zero exactly like an integer ``+=`` would. Scalars are
converted to the destination kind before use, for division as for
every other operation. Division of an integer buffer stays in
the integer kind and truncates the exact quotient toward zero.

No bounds checking is performed: callers guarantee that both buffers
hold at least ``count`` elements.
"""
from __future__ import annotations

from functools import lru_cache

import numpy as np


class ArrayOperator:
    """Elementwise kernels over the leading ``count`` elements of a buffer."""

    __slots__ = ("count", "_span")

    def __init__(self, count: int) -> None:
        if count < 1:
            raise ValueError(f"Operator element count must be positive, got {count}")
        self.count = count
        self._span = slice(0, count)

    def __repr__(self) -> str:
        return f"ArrayOperator(count={self.count})"

    def equals(self, v1: np.ndarray, v2: np.ndarray) -> bool:
        return bool(np.array_equal(v1[self._span], v2[self._span]))

    def set(self, v1: np.ndarray, v2: np.ndarray) -> None:
        np.copyto(v1[self._span], v2[self._span], casting="unsafe")

    def add(self, v1: np.ndarray, v2: np.ndarray) -> None:
        target = v1[self._span]
        np.add(target, v2[self._span], out=target, casting="unsafe")

    def sub(self, v1: np.ndarray, v2: np.ndarray) -> None:
        target = v1[self._span]
        np.subtract(target, v2[self._span], out=target, casting="unsafe")

    def mul(self, value: np.ndarray, scalar) -> None:
        target = value[self._span]
        np.multiply(target, value.dtype.type(scalar), out=target, casting="unsafe")

    def div(self, value: np.ndarray, scalar) -> None:
        target = value[self._span]
        scalar = value.dtype.type(scalar)
        if np.issubdtype(value.dtype, np.integer):
            # Exact quotient truncated toward zero: strip the truncated remainder first.
            np.floor_divide(target - np.fmod(target, scalar), scalar, out=target)
            return
        np.true_divide(target, scalar, out=target, casting="unsafe")

    def negate(self, value: np.ndarray) -> None:
        target = value[self._span]
        np.negative(target, out=target)

    def sqrt_magnitude(self, value: np.ndarray):
        """Sum of squares of the span, in the buffer's scalar kind."""
        segment = value[self._span]
        return value.dtype.type(np.dot(segment, segment))

    def normalize(self, value: np.ndarray, magnitude) -> None:
        # Zero magnitude is left to the scalar kind's own division semantics.
        self.div(value, magnitude)

    def dot(self, v1: np.ndarray, v2: np.ndarray):
        """Sum of pairwise products, in the first buffer's scalar kind."""
        return v1.dtype.type(np.dot(v1[self._span], v2[self._span]))


@lru_cache(maxsize=None)
def array_operator(count: int) -> ArrayOperator:
    """Return the shared operator bound to ``count`` elements."""
    return ArrayOperator(count)
