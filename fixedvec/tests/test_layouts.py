"""Tests for named component layouts and cross products."""
from __future__ import annotations

import pytest

from fixedvec import Vector, Vector2, Vector2i, Vector3, Vector3d, Vector4, Vector4i
from fixedvec.layouts import Vector2Base, Vector3Base


# //1.- Named and indexed access observe the same storage slot.
def test_named_components_alias_indices():
    v = Vector3.create([1, 2, 3])
    assert (v.x, v.y, v.z) == (1, 2, 3)
    assert (v[0], v[1], v[2]) == (v.x, v.y, v.z)

    v.y = 10
    assert v[1] == 10
    v[2] = 20
    assert v.z == 20


def test_alias_holds_after_arithmetic_and_normalisation():
    v = Vector4(1, 2, 3, 4)
    v += Vector4(1, 1, 1, 1)
    assert v.w == v[3] == 5
    v.normalize_this()
    assert [v.x, v.y, v.z, v.w] == [v[0], v[1], v[2], v[3]]


def test_generic_layout_has_no_named_components():
    v = Vector[5, float](1, 2, 3, 4, 5)
    assert not hasattr(v, "x")
    assert Vector2.components == ("x", "y")
    assert Vector4i.components == ("x", "y", "z", "w")


# //2.- Two-component cross product is the signed area.
def test_cross_2d_is_scalar():
    assert Vector2(1, 0).cross(Vector2(0, 1)) == 1
    assert Vector2(0, 1).cross(Vector2(1, 0)) == -1
    assert Vector2Base.cross_product(Vector2i(2, 3), Vector2i(4, 5)) == -2


# //3.- Three-component cross product in every exposed form.
def test_cross_3d_basis():
    result = Vector3(1, 0, 0).cross(Vector3(0, 1, 0))
    assert result == Vector3(0, 0, 1)
    assert type(result) is Vector3


def test_cross_3d_returns_new_vector():
    v = Vector3d(1.0, 2.0, 3.0)
    w = Vector3d(4.0, 5.0, 6.0)
    result = v.cross(w)
    assert result == Vector3d(-3.0, 6.0, -3.0)
    assert v == Vector3d(1.0, 2.0, 3.0)


def test_cross_in_place_uses_original_components():
    v = Vector3d(1.0, 2.0, 3.0)
    Vector3Base.cross_in_place(v, Vector3d(4.0, 5.0, 6.0))
    assert v == Vector3d(-3.0, 6.0, -3.0)


def test_cross_this_chains():
    v = Vector3(0, 1, 0)
    returned = v.cross_this(Vector3(0, 0, 1)).cross_this(Vector3(0, 1, 0))
    assert returned is v
    assert v == Vector3(0, 0, 1)


def test_cross_rejects_other_layouts():
    with pytest.raises(TypeError):
        Vector3(1, 0, 0).cross(Vector2(0, 1))
    with pytest.raises(TypeError):
        Vector2(1, 0).cross(Vector3(0, 1, 0))
