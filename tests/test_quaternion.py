import math

import pytest

from igcmath.quaternion import Quaternion
from igcmath.vectors import Vec3, Vec4


def test_identity_has_unit_length():
    assert Quaternion.identity().length() == pytest.approx(1.0)


def test_hamilton_product_i_times_j_is_k():
    i = Quaternion(0, 1, 0, 0)
    j = Quaternion(0, 0, 1, 0)
    assert tuple(i * j) == (0, 0, 0, 1)


def test_inverse_product_is_identity():
    q = Quaternion(1.5, -2.0, 0.25, 3.0)
    assert tuple(q * q.inverse()) == pytest.approx((1.0, 0.0, 0.0, 0.0), abs=1e-9)
    assert tuple(q.inverse() * q) == pytest.approx((1.0, 0.0, 0.0, 0.0), abs=1e-9)


def test_normalized_has_unit_length():
    q = Quaternion(3.0, 1.0, -2.0, 4.0)
    assert q.normalized().length() == pytest.approx(1.0)


def test_normalized_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Quaternion(0, 0, 0, 0).normalized()


def test_negation():
    q = Quaternion(1, 2, 3, 4)
    assert -q == Quaternion(-1, -2, -3, -4)


def test_from_axis_angle_zero_vector_is_identity():
    assert Quaternion.from_axis_angle(Vec3(0, 0, 0)) == Quaternion.identity()


def test_from_axis_angle_forms_agree():
    axis = Vec3(1.0, 2.0, -2.0)
    angle = axis.length()
    a = Quaternion.from_axis_angle(axis)
    b = Quaternion.from_axis_angle(axis.normalized(), angle)
    assert tuple(a) == pytest.approx(tuple(b), abs=1e-9)
    assert a.length() == pytest.approx(1.0)


def test_quarter_turn_about_z():
    q = Quaternion.from_axis_angle(Vec3(0, 0, 1), math.pi / 2)
    assert tuple(q * Vec3(1, 0, 0)) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)


def test_rotation_preserves_length_and_axis():
    axis = Vec3(0.3, -0.5, 0.8).normalized()
    q = Quaternion.from_axis_angle(axis, 1.234)
    v = Vec3(2.0, -1.0, 0.5)
    assert (q * v).length() == pytest.approx(v.length())
    assert tuple(q * axis) == pytest.approx(tuple(axis), abs=1e-9)


def test_matrix_agrees_with_vector_rotation():
    q = Quaternion.from_axis_angle(Vec3(0.4, 0.1, -0.7), 0.9).normalized()
    v = Vec3(1.0, 2.0, 3.0)
    rotated = q.matrix() * Vec4.from_vec3(v, 1.0)
    assert tuple(rotated.xyz()) == pytest.approx(tuple(q * v), abs=1e-9)
    assert rotated.w == pytest.approx(1.0)


def test_matrix_of_identity_is_identity():
    m = Quaternion.identity().matrix()
    expected = [1.0 if i == j else 0.0 for j in range(4) for i in range(4)]
    assert list(m.entries) == pytest.approx(expected, abs=1e-12)


def test_lerp_endpoints():
    a = Quaternion(1, 2, 3, 4)
    b = Quaternion(-1, 0, 5, 2)
    assert tuple(Quaternion.lerp(a, b, 0.0)) == pytest.approx((1, 2, 3, 4))
    assert tuple(Quaternion.lerp(a, b, 1.0)) == pytest.approx((-1, 0, 5, 2))


def test_to_hemisphere():
    q = Quaternion(1, 0, 0, 0)
    assert q.to_hemisphere(Quaternion(-1, 0, 0, 0)) == -q
    assert q.to_hemisphere(Quaternion(0.5, 0.5, 0, 0)) == q


def test_str_format():
    assert str(Quaternion(1, 0.5, -2, 3)) == "Quaternion(1, 0.5, -2, 3)"