"""Tracing streamlines through a structure tensor field."""

from __future__ import annotations

import math
from collections import deque
from typing import Callable, Deque, List, Optional

from .image import FilterMode, Image, PixelType, Sampler
from .structure_tensor import st_anisotropy, st_tangent
from .vecmath import Vector, dot, radians

TensorField = Callable[[float, float], Vector]
_Advance = Callable[[Vector, Vector], Optional[Vector]]


class PathCollector:
    """Collects the points visited along a streamline, ordered by arc length.

    Points on the backward side (negative sign) go in front, forward ones
    after; each point is stored as ``(x, y, signed arc length)``.
    """

    def __init__(self, sigma: float, precision: float) -> None:
        self._radius = precision * sigma
        self._points: Deque[Vector] = deque()

    @property
    def radius(self) -> float:
        """Arc length at which tracing stops on each side."""
        return self._radius

    def __call__(self, sign: float, u: float, p: Vector) -> None:
        point = Vector(p.x, p.y, sign * u)
        if sign < 0:
            self._points.appendleft(point)
        else:
            self._points.append(point)

    @property
    def points(self) -> List[Vector]:
        return list(self._points)


def _integrate(p0, st, f, width, height, step_size, advance: _Advance) -> None:
    f(0, 0, p0)
    v0 = st_tangent(st(p0.x, p0.y))
    for sign in (-1.0, 1.0):
        v = v0 * sign
        p = p0 + step_size * v
        u = step_size
        while u < f.radius and 0 <= p.x < width and 0 <= p.y < height:
            f(sign, u, p)
            t = advance(p, v)
            if t is None:
                break
            v = t
            p = p + step_size * t
            u += step_size


def _oriented(t: Vector, v: Vector) -> Vector:
    return -t if dot(v, t) < 0 else t


def integrate_euler(p0, st, f, cos_max, width, height, step_size) -> None:
    """Trace both ways from ``p0`` with Euler steps, feeding points to ``f``."""

    def advance(p: Vector, v: Vector) -> Optional[Vector]:
        t = st_tangent(st(p.x, p.y))
        vt = dot(v, t)
        if abs(vt) <= cos_max:
            return None
        return -t if vt < 0 else t

    _integrate(p0, st, f, width, height, step_size, advance)


def integrate_rk2(p0, st, f, cos_max, width, height, step_size) -> None:
    """Trace both ways from ``p0`` with midpoint (second-order) steps."""

    def advance(p: Vector, v: Vector) -> Optional[Vector]:
        t = _oriented(st_tangent(st(p.x, p.y)), v)
        t = st_tangent(st(p.x + 0.5 * step_size * t.x, p.y + 0.5 * step_size * t.y))
        vt = dot(v, t)
        if abs(vt) <= cos_max:
            return None
        return -t if vt < 0 else t

    _integrate(p0, st, f, width, height, step_size, advance)


def integrate_rk4(p0, st, f, cos_max, width, height, step_size) -> None:
    """Trace both ways from ``p0`` with fourth-order Runge-Kutta steps."""

    def advance(p: Vector, v: Vector) -> Optional[Vector]:
        k1 = _oriented(st_tangent(st(p.x, p.y)), v)
        k2 = _oriented(
            st_tangent(st(p.x + 0.5 * step_size * k1.x, p.y + 0.5 * step_size * k1.y)), v
        )
        k3 = _oriented(
            st_tangent(st(p.x + 0.5 * step_size * k2.x, p.y + 0.5 * step_size * k2.y)), v
        )
        k4 = _oriented(
            st_tangent(st(p.x + step_size * k3.x, p.y + step_size * k3.y)), v
        )
        t = (k1 + 2 * k2 + 2 * k3 + k4) / 6.0
        if abs(dot(v, t)) <= cos_max:
            return None
        return t

    _integrate(p0, st, f, width, height, step_size, advance)


_INTEGRATORS = {1: integrate_euler, 2: integrate_rk2, 4: integrate_rk4}


def stgauss2_path(
    ix: int,
    iy: int,
    st: Image,
    sigma: float,
    max_angle: float,
    adaptive: bool,
    st_linear: bool,
    order: int,
    step_size: float,
    precision: float,
) -> List[Vector]:
    """The streamline through pixel ``(ix, iy)`` of a FLOAT4 tensor image.

    Returns ``(x, y, signed arc length)`` points ordered from the backward
    end to the forward end. ``order`` selects Euler (1), midpoint (2) or
    Runge-Kutta (4) integration.
    """
    if st.pixel_type is not PixelType.FLOAT4:
        raise ValueError(f"structure tensor image must be FLOAT4, not {st.pixel_type.name}")
    try:
        integrate = _INTEGRATORS[order]
    except KeyError:
        raise ValueError(f"integration order must be 1, 2 or 4, not {order}") from None

    sampler = Sampler(st, FilterMode.LINEAR if st_linear else FilterMode.POINT)
    p0 = Vector(ix + 0.5, iy + 0.5)
    if adaptive:
        a = st_anisotropy(st.pixel(p0.x, p0.y))
        sigma *= 0.25 * (1 + a) * (1 + a)
    cos_max = math.cos(radians(max_angle))
    collector = PathCollector(sigma, precision)
    integrate(p0, sampler, collector, cos_max, st.width, st.height, step_size)
    return collector.points