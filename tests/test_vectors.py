import pytest

from igcmath.vectors import Vec2, Vec3, Vec4


def test_zero_vectors_have_zero_length():
    assert Vec2.zero().length() == 0
    assert Vec3.zero().length() == 0
    assert Vec4.zero().length() == 0


def test_vec4_origin():
    assert Vec4.origin() == Vec4(0, 0, 0, 1)


def test_vec3_length_pinned():
    assert Vec3(3, 4, 0).length() == pytest.approx(5.0)


@pytest.mark.parametrize(
    "v",
    [Vec2(1.5, -2.0), Vec3(1, 2, 3), Vec4(-1, 0.5, 2, 7)],
)
def test_normalized_has_unit_length(v):
    assert v.normalized().length() == pytest.approx(1.0)


def test_normalized_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3.zero().normalized()


def test_add_sub_round_trip():
    a = Vec3(1, 2, 3)
    b = Vec3(-4, 0.5, 9)
    assert (a + b) - b == a


def test_negation_and_abs():
    v = Vec4(1, -2, 3, -4)
    assert -(-v) == v
    assert abs(-v) == abs(v)
    assert all(c >= 0 for c in abs(v))


def test_scalar_multiplication_commutes():
    v = Vec3(1, -2, 5)
    assert 2.5 * v == v * 2.5
    assert (v * 2) / 2 == v


def test_vec3_componentwise_mul_div():
    a = Vec3(2, 3, 4)
    b = Vec3(5, 6, 7)
    assert (a * b) / b == a
    assert (a * b) == (b * a)


def test_scalar_over_vector():
    v = Vec2(2, 4)
    assert (1 / v) * v == pytest.approx(v.dot(1 / v))
    assert list(Vec3(2, 4, 8) * (1 / Vec3(2, 4, 8))) == pytest.approx([1, 1, 1])


def test_vec2_star_is_dot():
    a = Vec2(1, 2)
    b = Vec2(3, -4)
    assert a * b == a.dot(b)
    assert a * b == -5


def test_vec3_cross_orthogonal_and_anticommutative():
    a = Vec3(1, 2, 3)
    b = Vec3(-2, 0.5, 4)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0)
    assert c.dot(b) == pytest.approx(0)
    assert b.cross(a) == -c


def test_vec3_cross_of_axes():
    assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_vec2_cross_and_perp():
    a = Vec2(2, 3)
    b = Vec2(-1, 5)
    assert a.cross(b) == -b.cross(a)
    assert a.perp().dot(a) == 0
    assert a.cross(b) == pytest.approx(a.perp().dot(b))
    assert Vec2(1, 0).perp() == Vec2(0, 1)


def test_lerp_endpoints_and_midpoint():
    a = Vec3(1, 2, 3)
    b = Vec3(5, -6, 7)
    assert Vec3.lerp(a, b, 0) == a
    assert Vec3.lerp(a, b, 1) == b
    assert list(Vec3.lerp(a, b, 0.5)) == pytest.approx(list(0.5 * (a + b)))
    p = Vec2(0, 1)
    q = Vec2(4, 3)
    assert Vec2.lerp(p, q, 0) == p
    assert Vec2.lerp(p, q, 1) == q


def test_maximum_minimum():
    a = Vec3(1, 5, -2)
    b = Vec3(3, 2, -1)
    hi = a.maximum(b)
    lo = a.minimum(b)
    assert hi == Vec3(3, 5, -1)
    assert lo == Vec3(1, 2, -2)
    assert hi + lo == a + b
    c = Vec2(1, 4)
    d = Vec2(2, 3)
    assert c.maximum(d) == Vec2(2, 4)
    assert c.minimum(d) == Vec2(1, 3)


def test_pairwise_comparison_requires_all_components():
    a = Vec3(1, 2, 3)
    assert a < Vec3(2, 3, 4)
    assert not a < Vec3(2, 3, 3)
    assert a <= Vec3(1, 2, 3)
    assert not (a > Vec3(0, 5, 0))
    assert not (a < Vec3(0, 5, 9))


def test_rotate_preserves_length():
    v = Vec2(3, -1)
    for theta in (0.3, 1.0, 2.5, -4.0):
        assert v.rotate(theta).length() == pytest.approx(v.length())


def test_rotate_zero_is_identity_and_inverse():
    v = Vec2(1.25, -7)
    assert v.rotate(0) == v
    assert list(v.rotate(0.8).rotate(-0.8)) == pytest.approx(list(v))


def test_transform_round_trip():
    v = Vec2(2, -3)
    origin = Vec2(10, 4)
    theta = 1.1
    back = v.transform(origin, theta).inverse_transform(origin, theta)
    assert list(back) == pytest.approx(list(v))


def test_random_in_range():
    for cls in (Vec2, Vec3, Vec4):
        for _ in range(50):
            v = cls.random(-2.0, 3.0)
            assert all(-2.0 <= c < 3.0 for c in v)


def test_vec4_from_vec3_round_trip():
    v = Vec3(1, 2, 3)
    w = Vec4.from_vec3(v, 9)
    assert w.xyz() == v
    assert w.w == 9


def test_indexing_and_color_accessors():
    v = Vec4(1, 2, 3, 4)
    assert list(v) == [v[0], v[1], v[2], v[3]]
    assert (v.r, v.g, v.b, v.a) == (v.x, v.y, v.z, v.w)
    u = Vec3(5, 6, 7)
    assert (u.r, u.g, u.b) == tuple(u)
    assert len(u) == 3


def test_mixed_types_rejected():
    with pytest.raises(TypeError):
        Vec3(1, 2, 3) + Vec2(1, 2)


def test_dot_matches_length_squared():
    v = Vec4(1, -2, 3, 0.5)
    assert v.dot(v) == pytest.approx(v.length() ** 2)