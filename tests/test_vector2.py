import math

import pytest

from neonshooter.vector2 import Vector2


def test_add_then_subtract_round_trip():
    a = Vector2(1.5, -2.25)
    b = Vector2(0.75, 4.0)
    assert (a + b) - b == a


def test_scalar_multiplication_scales_components():
    v = Vector2(2.0, -3.0)
    assert v * 2.0 == Vector2(4.0, -6.0)
    assert 2.0 * v == v * 2.0


def test_in_place_operators_mutate_same_object():
    v = Vector2(1.0, 1.0)
    same = v
    v += Vector2(2.0, 3.0)
    v -= Vector2(1.0, 1.0)
    v *= 2.0
    assert same is v
    assert v == Vector2(4.0, 6.0)


def test_magnitude_matches_squared_magnitude():
    v = Vector2(3.0, 4.0)
    assert v.magnitude() == pytest.approx(math.sqrt(v.sqr_magnitude()))
    assert v.magnitude() == pytest.approx(5.0)


def test_normalized_has_unit_length_and_same_direction():
    v = Vector2(-7.0, 2.5)
    n = v.normalized()
    assert n.magnitude() == pytest.approx(1.0)
    assert n.x * v.y - n.y * v.x == pytest.approx(0.0)
    assert v == Vector2(-7.0, 2.5)


def test_normalize_in_place():
    v = Vector2(0.0, 10.0)
    v.normalize()
    assert v == Vector2.down()


def test_normalize_leaves_zero_vector_alone():
    v = Vector2.zero()
    v.normalize()
    assert v == Vector2(0.0, 0.0)


def test_normalized_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2.zero().normalized()


def test_named_directions():
    assert Vector2.up() == Vector2(0, -1)
    assert Vector2.down() == Vector2(0, 1)
    assert Vector2.left() == Vector2(-1, 0)
    assert Vector2.right() == Vector2(1, 0)
    assert Vector2.one() == Vector2(1, 1)
    assert Vector2.up() + Vector2.down() == Vector2.zero()


def test_default_is_origin_and_unpacks():
    x, y = Vector2()
    assert (x, y) == (0.0, 0.0)