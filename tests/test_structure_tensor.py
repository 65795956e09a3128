import math

import pytest

from xdogflow.structure_tensor import (
    st_angle,
    st_anisotropy,
    st_gradient,
    st_lambda,
    st_lfm,
    st_tangent,
    st_tfm,
    tfm_anisotropy,
)
from xdogflow.vecmath import Vector, dot, length

SAMPLES = [
    Vector(1.0, 0.0, 0.0, 0.0),
    Vector(0.0, 1.0, 0.0, 0.0),
    Vector(3.0, 1.0, 0.5, 0.0),
    Vector(2.0, 5.0, -1.5, 0.0),
    Vector(0.7, 0.7, 0.3, 9.0),
]


@pytest.mark.parametrize("g", SAMPLES)
def test_eigenvalues_match_trace_and_determinant(g):
    l1, l2 = st_lambda(g)
    assert l1 + l2 == pytest.approx(g.x + g.y)
    assert l1 * l2 == pytest.approx(g.x * g.y - g.z * g.z, abs=1e-12)
    assert l1 >= l2


@pytest.mark.parametrize("g", SAMPLES)
def test_tangent_and_gradient_are_orthonormal(g):
    t = st_tangent(g)
    n = st_gradient(g)
    assert length(t) == pytest.approx(1.0)
    assert length(n) == pytest.approx(1.0)
    assert dot(t, n) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("g", SAMPLES)
def test_tangent_is_minor_eigenvector(g):
    t = st_tangent(g)
    _, l2 = st_lambda(g)
    mt = (g.x * t.x + g.z * t.y, g.z * t.x + g.y * t.y)
    assert mt[0] == pytest.approx(l2 * t.x, abs=1e-9)
    assert mt[1] == pytest.approx(l2 * t.y, abs=1e-9)


def test_angle_agrees_with_tangent():
    g = SAMPLES[2]
    phi = st_angle(g)
    assert st_tangent(g) == pytest.approx((math.cos(phi), math.sin(phi)))


def test_horizontal_gradient_gives_vertical_tangent():
    t = st_tangent(Vector(1.0, 0.0, 0.0, 0.0))
    assert t.x == pytest.approx(0.0, abs=1e-12)
    assert abs(t.y) == pytest.approx(1.0)


@pytest.mark.parametrize("g", SAMPLES)
def test_tfm_packs_tangent_and_eigenvalues(g):
    tfm = st_tfm(g)
    assert tfm.truncate(2) == pytest.approx(st_tangent(g))
    assert (tfm.z, tfm.w) == pytest.approx(st_lambda(g))
    assert tfm_anisotropy(tfm) == pytest.approx(st_anisotropy(g))


def test_anisotropy_extremes():
    assert st_anisotropy(Vector(1.0, 1.0, 0.0, 0.0)) == pytest.approx(0.0)
    assert st_anisotropy(Vector(1.0, 0.0, 0.0, 0.0)) == pytest.approx(1.0)
    assert st_anisotropy(Vector(0.0, 0.0, 0.0, 0.0)) == 0.0


@pytest.mark.parametrize("g", SAMPLES)
def test_anisotropy_in_unit_range(g):
    assert 0.0 <= st_anisotropy(g) <= 1.0 + 1e-12


def test_lfm_without_alpha_has_unit_factors():
    lfm = st_lfm(SAMPLES[3])
    assert (lfm.z, lfm.w) == (1.0, 1.0)
    assert lfm.truncate(2) == pytest.approx(st_tangent(SAMPLES[3]))


@pytest.mark.parametrize("g", SAMPLES)
def test_lfm_factors_are_reciprocal_when_unclamped(g):
    lfm = st_lfm(g, 1.0)
    assert lfm.z * lfm.w == pytest.approx(1.0)


def test_lfm_factors_clamped():
    lfm = st_lfm(Vector(1.0, 0.0, 0.0, 0.0), 0.01)
    assert lfm.z == 2.0
    assert lfm.w == 0.1


def test_lfm_with_zero_alpha_stays_finite():
    lfm = st_lfm(Vector(1.0, 0.0, 0.0, 0.0), 0.0)
    assert lfm.z == 2.0
    assert lfm.w == 0.1