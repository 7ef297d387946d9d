import math

import pytest

from brickout.vec2 import Vec2


def test_add_and_subtract_are_inverse():
    a = Vec2(1.5, -2.0)
    b = Vec2(4.0, 0.25)
    assert (a + b) - b == a
    assert a + b == b + a


def test_negation():
    v = Vec2(3, -4)
    assert -v == Vec2(-3, 4)
    assert v + (-v) == Vec2(0, 0)


def test_scalar_multiplication_both_sides():
    v = Vec2(2.0, 3.0)
    assert v * 2 == 2 * v
    assert (v * 4.0) / 4.0 == v


def test_integer_division_truncates_toward_zero():
    assert Vec2(-7, 7) / 2 == Vec2(-3, 3)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1, 1) / 0


def test_rounded_halves_away_from_zero():
    assert Vec2(2.5, -2.5).rounded() == Vec2(3.0, -3.0)


def test_rounded_int_vector_unchanged():
    v = Vec2(5, -6)
    assert v.rounded() == v


def test_to_int_truncates():
    v = Vec2(1.9, -1.9).to_int()
    assert v == Vec2(int(1.9), int(-1.9))
    assert all(isinstance(c, int) for c in v)


def test_to_float_round_trip():
    v = Vec2(3, -8)
    assert v.to_float().to_int() == v
    assert all(isinstance(c, float) for c in v.to_float())


def test_length_matches_length_sq():
    v = Vec2(3.0, 4.0)
    assert math.isclose(v.length() ** 2, v.length_sq())
    assert v.length() == 5.0


def test_integer_length_is_integer_and_not_above_true_length():
    v = Vec2(1, 1)
    assert isinstance(v.length(), int)
    assert v.length() <= math.hypot(1, 1)


@pytest.mark.parametrize("v", [Vec2(3.0, 4.0), Vec2(-0.1, 7.5), Vec2(10, -2)])
def test_normalized_has_unit_length(v):
    n = v.normalized()
    assert math.isclose(math.hypot(n.x, n.y), 1.0)
    assert math.copysign(1, n.x) == math.copysign(1, v.x)


def test_normalized_zero_vector_unchanged():
    assert Vec2(0.0, 0.0).normalized() == Vec2(0.0, 0.0)


def test_unpacking():
    x, y = Vec2(8, 9)
    assert (x, y) == (8, 9)


def test_vectors_are_immutable():
    v = Vec2(1, 2)
    with pytest.raises(AttributeError):
        v.x = 5
    assert v.x == 1
    assert v == Vec2(1, 2)