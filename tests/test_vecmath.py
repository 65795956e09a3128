import math

import pytest

from xdogflow.vecmath import (
    Vector,
    clamp,
    cross,
    degrees,
    dot,
    fract,
    length,
    lerp,
    normalize,
    radians,
    reflect,
    sign,
    smoothstep,
    vabs,
    vfloor,
    vmax,
    vmin,
)


def test_components_and_size_limits():
    v = Vector(1.5, -2.0, 3.25, 4.0)
    assert (v.x, v.y, v.z, v.w) == (1.5, -2.0, 3.25, 4.0)
    with pytest.raises(ValueError):
        Vector()
    with pytest.raises(ValueError):
        Vector(1, 2, 3, 4, 5)
    with pytest.raises(AttributeError):
        Vector(1.0, 2.0).z


def test_splat_extend_truncate_round_trip():
    v = Vector.splat(0.5, 3)
    assert v == Vector(0.5, 0.5, 0.5)
    extended = v.extend(1)
    assert extended.w == 1
    assert extended.truncate(3) == v
    with pytest.raises(ValueError):
        v.truncate(4)


def test_add_sub_are_inverse():
    a = Vector(1.0, 2.5, -3.0)
    b = Vector(0.25, -4.0, 7.0)
    assert (a + b) - b == a
    assert a - a == Vector.splat(0.0, 3)


def test_scalar_broadcast_and_mul():
    a = Vector(1.0, 2.0, 3.0, 4.0)
    assert a * 2 == a + a
    assert 2 * a == a * 2
    assert a * a == Vector(*(c * c for c in a))
    assert -a + a == Vector.splat(0.0, 4)


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        Vector(1.0, 2.0) + Vector(1.0, 2.0, 3.0)


def test_scalar_over_vector_matches_vector_over_scalar():
    v = Vector(2.0, 4.0)
    assert 2.0 / v == v / 2.0


def test_integer_division_truncates_toward_zero():
    assert Vector(-7, 7, 1) / 2 == Vector(-3, 3, 0)


def test_lerp_endpoints():
    a = Vector(1.0, 2.0)
    b = Vector(5.0, -6.0)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b
    assert lerp(3.0, 9.0, 0.0) == 3.0


def test_clamp_scalar_and_vector():
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-5.0, 0.0, 1.0) == 0.0
    v = clamp(Vector(-1.0, 0.5, 2.0), 0.0, 1.0)
    assert all(0.0 <= c <= 1.0 for c in v)
    assert v.y == 0.5
    lo = Vector(0.0, 1.0)
    hi = Vector(0.5, 2.0)
    assert clamp(Vector(3.0, -3.0), lo, hi) == Vector(hi.x, lo.y)


def test_smoothstep_edges_and_symmetry():
    assert smoothstep(0.0, 1.0, -1.0) == 0.0
    assert smoothstep(0.0, 1.0, 2.0) == 1.0
    assert smoothstep(0.0, 1.0, 0.5) == pytest.approx(0.5)
    for x in (0.1, 0.3, 0.45):
        assert smoothstep(0.0, 1.0, x) + smoothstep(0.0, 1.0, 1 - x) == pytest.approx(1.0)


def test_fract_range():
    for x in (-2.75, -0.1, 0.0, 3.5, 10.25):
        f = fract(x)
        assert 0.0 <= f < 1.0
        assert math.floor(x) + f == pytest.approx(x)


def test_sign():
    assert sign(0.0) == 0.0
    for x in (0.5, 3.0, 100.0):
        assert sign(x) == 1.0
        assert sign(-x) == -sign(x)


def test_radians_degrees():
    assert radians(180.0) == pytest.approx(math.pi)
    for d in (-45.0, 22.5, 90.0):
        assert degrees(radians(d)) == pytest.approx(d)


def test_dot_length_normalize():
    v = Vector(3.0, -1.0, 2.0)
    assert length(v) ** 2 == pytest.approx(dot(v, v))
    assert length(normalize(v)) == pytest.approx(1.0)
    assert dot(2.0, 3.5) == 2.0 * 3.5
    with pytest.raises(ZeroDivisionError):
        normalize(Vector(0.0, 0.0))
    with pytest.raises(TypeError):
        dot(v, 2.0)


def test_cross_is_orthogonal():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-2.0, 0.5, 4.0)
    c = cross(a, b)
    assert dot(c, a) == pytest.approx(0.0)
    assert dot(c, b) == pytest.approx(0.0)
    assert cross(b, a) == -c
    with pytest.raises(ValueError):
        cross(Vector(1.0, 2.0), Vector(3.0, 4.0))


def test_reflect_preserves_length_and_flips_normal_part():
    i = Vector(1.0, -1.0)
    n = normalize(Vector(0.0, 1.0))
    r = reflect(i, n)
    assert length(r) == pytest.approx(length(i))
    assert dot(r, n) == pytest.approx(-dot(i, n))


def test_componentwise_helpers():
    a = Vector(1.5, -2.5, 3.0)
    b = Vector(2.0, -3.0, 3.0)
    assert vmin(a, b) == Vector(a.x, b.y, a.z)
    assert vmax(a, b) == Vector(b.x, a.y, b.z)
    assert vabs(a) == Vector(*(abs(c) for c in a))
    assert abs(a) == vabs(a)
    floored = vfloor(a)
    assert all(c == math.floor(c) for c in floored)
    assert all(0.0 <= x - f < 1.0 for x, f in zip(a, floored))