"""Tests for the elementwise operator engine."""
from __future__ import annotations

import numpy as np
import pytest

from fixedvec.operators import ArrayOperator, array_operator


# //1.- Operators are shared per element count and reject empty spans.
def test_array_operator_is_cached_per_count():
    assert array_operator(3) is array_operator(3)
    assert array_operator(3) is not array_operator(2)
    assert array_operator(4).count == 4
    with pytest.raises(ValueError):
        ArrayOperator(0)


# //2.- Equality only inspects the leading span.
def test_equals_compares_leading_elements_only():
    a = np.array([1, 2, 3], dtype=np.int32)
    b = np.array([1.0, 2.0, 9.0], dtype=np.float64)
    assert array_operator(2).equals(a, b)
    assert not array_operator(3).equals(a, b)


def test_set_copies_span_and_leaves_tail():
    dst = np.array([1.0, 2.0, 3.0], dtype=np.float32)
    src = np.array([7, 8], dtype=np.int64)
    array_operator(2).set(dst, src)
    assert dst.tolist() == [7.0, 8.0, 3.0]


# //3.- Mixed kinds are stored back in the destination kind.
def test_add_and_sub_truncate_into_integer_destination():
    dst = np.array([1, 2], dtype=np.int32)
    array_operator(2).add(dst, np.array([0.5, 1.7]))
    assert dst.tolist() == [1, 3]
    array_operator(2).sub(dst, np.array([0.5, 0.5]))
    assert dst.tolist() == [0, 2]
    assert dst.dtype == np.int32


def test_mul_and_div_convert_scalar_to_destination_kind():
    values = np.array([3, 9], dtype=np.int32)
    array_operator(2).mul(values, 2.9)
    assert values.tolist() == [6, 18]
    array_operator(2).div(values, 2.9)
    assert values.tolist() == [3, 9]


def test_integer_division_truncates_toward_zero():
    values = np.array([7, -7], dtype=np.int64)
    array_operator(2).div(values, 2)
    assert values.tolist() == [3, -3]


def test_integer_division_is_exact_beyond_float_precision():
    big = 2**53 + 1
    values = np.array([big, -big, 7], dtype=np.int64)
    array_operator(3).div(values, 1)
    assert values.tolist() == [big, -big, 7]
    array_operator(3).div(values, 2)
    assert values.tolist() == [big // 2, -(big // 2), 3]

    unsigned = np.array([2**64 - 1], dtype=np.uint64)
    array_operator(1).div(unsigned, 1)
    assert int(unsigned[0]) == 2**64 - 1


def test_negate_wraps_unsigned_kinds():
    values = np.array([1, 0], dtype=np.uint8)
    array_operator(2).negate(values)
    assert values.tolist() == [255, 0]


# //4.- Reductions return the first operand's scalar kind.
def test_sqrt_magnitude_and_dot():
    a = np.array([3.0, 4.0, 12.0], dtype=np.float32)
    assert array_operator(2).sqrt_magnitude(a) == 25.0
    assert array_operator(3).sqrt_magnitude(a) == 169.0
    assert isinstance(array_operator(3).sqrt_magnitude(a), np.float32)

    ints = np.array([1, 2], dtype=np.int32)
    floats = np.array([0.5, 0.75])
    result = array_operator(2).dot(ints, floats)
    assert isinstance(result, np.int32)
    assert result == 2


def test_normalize_divides_by_magnitude():
    values = np.array([3.0, 4.0])
    array_operator(2).normalize(values, 5.0)
    assert values.tolist() == pytest.approx([0.6, 0.8])


def test_normalize_by_zero_follows_float_semantics():
    values = np.array([0.0, 1.0])
    with np.errstate(divide="ignore", invalid="ignore"):
        array_operator(2).normalize(values, 0.0)
    assert np.isnan(values[0])
    assert np.isinf(values[1])
