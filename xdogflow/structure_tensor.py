"""Eigen-analysis of 2x2 structure tensors stored as ``(E, G, F[, unused])``.

A structure tensor ``g`` packs the symmetric matrix ``[[E, F], [F, G]]`` as
``g[0] = E``, ``g[1] = G`` and ``g[2] = F``; a fourth component is ignored.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from .vecmath import Vector, clamp

Tensor = Sequence[float]


def _ieee_div(a: float, b: float) -> float:
    """Divide as floating-point hardware does, giving inf or nan on zero."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def st_angle(g: Tensor) -> float:
    """Angle of the minor eigenvector, the local edge tangent, in radians."""
    return 0.5 * math.atan2(-2 * g[2], g[1] - g[0])


def st_tangent(g: Tensor) -> Vector:
    """Unit vector along the minor eigenvector (the flow direction)."""
    phi = st_angle(g)
    return Vector(math.cos(phi), math.sin(phi))


def st_gradient(g: Tensor) -> Vector:
    """Unit vector along the major eigenvector (the gradient direction)."""
    phi = 0.5 * math.atan2(2 * g[2], g[0] - g[1])
    return Vector(math.cos(phi), math.sin(phi))


def _eigenvalues(g: Tensor) -> tuple:
    e, gg, f = g[0], g[1], g[2]
    a = 0.5 * (gg + e)
    b = 0.5 * math.sqrt(max(0.0, gg * gg - 2 * e * gg + e * e + 4 * f * f))
    return a + b, a - b


def st_lambda(g: Tensor) -> Vector:
    """Major and minor eigenvalues, largest first."""
    return Vector(*_eigenvalues(g))


def st_tfm(g: Tensor) -> Vector:
    """Tangent field entry: ``(tangent.x, tangent.y, lambda1, lambda2)``."""
    t = st_tangent(g)
    l1, l2 = _eigenvalues(g)
    return Vector(t.x, t.y, l1, l2)


def _anisotropy(lambda1: float, lambda2: float) -> float:
    if lambda1 + lambda2 > 0:
        return (lambda1 - lambda2) / (lambda1 + lambda2)
    return 0.0


def tfm_anisotropy(t: Tensor) -> float:
    """Anisotropy in ``[0, 1]`` from a tangent field entry's eigenvalues."""
    return _anisotropy(t[2], t[3])


def st_anisotropy(g: Tensor) -> float:
    """Anisotropy in ``[0, 1]`` of a structure tensor; 0 where it vanishes."""
    return _anisotropy(*_eigenvalues(g))


def st_lfm(g: Tensor, alpha: Optional[float] = None) -> Vector:
    """Local frame: tangent plus stretch factors along and across it.

    Without ``alpha`` both factors are 1; otherwise they follow the
    anisotropy and are clamped to ``[0.1, 2]``.
    """
    t = st_tangent(g)
    if alpha is None:
        return Vector(t.x, t.y, 1.0, 1.0)
    a = st_anisotropy(g)
    along = clamp(_ieee_div(alpha + a, alpha), 0.1, 2.0)
    across = clamp(_ieee_div(alpha, alpha + a), 0.1, 2.0)
    return Vector(t.x, t.y, along, across)