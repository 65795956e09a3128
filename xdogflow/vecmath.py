"""Small fixed-size vectors and the scalar helpers used by the filters."""

from __future__ import annotations

import math
from numbers import Real
from typing import Union

Number = Union[int, float]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _divide(a: Number, b: Number) -> Number:
    """Divide, truncating toward zero when both operands are integers."""
    if _is_int(a) and _is_int(b):
        quotient = abs(a) // abs(b)
        return quotient if (a >= 0) == (b >= 0) else -quotient
    return a / b


def _fmin(a: Number, b: Number) -> Number:
    return a if a < b else b


def _fmax(a: Number, b: Number) -> Number:
    return a if a > b else b


class Vector(tuple):
    """An immutable vector of one to four numeric components.

    Arithmetic works component by component; a plain number on either side
    is applied to every component.
    """

    __slots__ = ()

    def __new__(cls, *components: Number) -> "Vector":
        if not 1 <= len(components) <= 4:
            raise ValueError(
                f"a vector holds 1 to 4 components, got {len(components)}"
            )
        for c in components:
            if not isinstance(c, Real):
                raise TypeError(f"vector components must be numbers, got {c!r}")
        return super().__new__(cls, components)

    @classmethod
    def splat(cls, value: Number, n: int) -> "Vector":
        """Return a vector of ``n`` components all equal to ``value``."""
        return cls(*([value] * n))

    def _component(self, index: int, name: str) -> Number:
        if index >= len(self):
            raise AttributeError(f"{len(self)}-component vector has no {name}")
        return tuple.__getitem__(self, index)

    @property
    def x(self) -> Number:
        return self._component(0, "x")

    @property
    def y(self) -> Number:
        return self._component(1, "y")

    @property
    def z(self) -> Number:
        return self._component(2, "z")

    @property
    def w(self) -> Number:
        return self._component(3, "w")

    def extend(self, *args: Number) -> "Vector":
        """Return this vector with ``args`` appended as further components."""
        return Vector(*self, *args)

    def truncate(self, n: int) -> "Vector":
        """Return the first ``n`` components, discarding the rest."""
        if not 1 <= n <= len(self):
            raise ValueError(f"cannot truncate a {len(self)}-vector to {n}")
        return Vector(*tuple(self)[:n])

    def _zip(self, other: "Vector") -> zip:
        if len(other) != len(self):
            raise ValueError(
                f"vector sizes differ: {len(self)} and {len(other)}"
            )
        return zip(self, other)

    def _apply(self, other: object, op, reverse: bool = False):
        if isinstance(other, Vector):
            pairs = self._zip(other)
        elif isinstance(other, Real):
            pairs = ((c, other) for c in self)
        else:
            return NotImplemented
        if reverse:
            return Vector(*(op(b, a) for a, b in pairs))
        return Vector(*(op(a, b) for a, b in pairs))

    def __add__(self, other):
        return self._apply(other, lambda a, b: a + b)

    def __radd__(self, other):
        return self._apply(other, lambda a, b: a + b, reverse=True)

    def __sub__(self, other):
        return self._apply(other, lambda a, b: a - b)

    def __rsub__(self, other):
        return self._apply(other, lambda a, b: a - b, reverse=True)

    def __mul__(self, other):
        return self._apply(other, lambda a, b: a * b)

    def __rmul__(self, other):
        return self._apply(other, lambda a, b: a * b, reverse=True)

    def __truediv__(self, other):
        if isinstance(other, Vector):
            return Vector(*(_divide(a, b) for a, b in self._zip(other)))
        if isinstance(other, Real):
            if _is_int(other) and all(_is_int(c) for c in self):
                return Vector(*(_divide(c, other) for c in self))
            inv = 1.0 / other
            return self * inv
        return NotImplemented

    def __rtruediv__(self, other):
        # A number divided by a vector scales the vector by the number's
        # reciprocal, matching the vector types these filters were built on.
        if isinstance(other, Real):
            return self.__truediv__(other)
        return NotImplemented

    def __neg__(self) -> "Vector":
        return Vector(*(-c for c in self))

    def __pos__(self) -> "Vector":
        return self

    def __abs__(self) -> "Vector":
        return vabs(self)

    def __floor__(self) -> "Vector":
        return vfloor(self)

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(c) for c in self)})"


VectorOrNumber = Union[Vector, Number]


def lerp(a: VectorOrNumber, b: VectorOrNumber, t: Number) -> VectorOrNumber:
    """Linear interpolation between ``a`` and ``b``."""
    return a + t * (b - a)


def _clamp_scalar(f: Number, lo: Number, hi: Number) -> Number:
    return _fmax(lo, _fmin(f, hi))


def clamp(v: VectorOrNumber, lo: VectorOrNumber, hi: VectorOrNumber) -> VectorOrNumber:
    """Clamp a number or each vector component to ``[lo, hi]``."""
    if not isinstance(v, Vector):
        if isinstance(lo, Vector) or isinstance(hi, Vector):
            raise TypeError("a number can only be clamped to number bounds")
        return _clamp_scalar(v, lo, hi)
    los = tuple(lo) if isinstance(lo, Vector) else (lo,) * len(v)
    his = tuple(hi) if isinstance(hi, Vector) else (hi,) * len(v)
    if len(los) != len(v) or len(his) != len(v):
        raise ValueError("clamp bounds must match the vector size")
    return Vector(*(_clamp_scalar(c, a, b) for c, a, b in zip(v, los, his)))


def smoothstep(a: Number, b: Number, x: Number) -> float:
    """Hermite interpolation of ``x`` between edges ``a`` and ``b``."""
    t = (x - a) / (b - a)
    if t < 0:
        t = 0.0
    if t > 1:
        t = 1.0
    return t * t * (3 - 2 * t)


def fract(x: Number) -> float:
    """Fractional part, ``x - floor(x)``."""
    return x - math.floor(x)


def sign(x: Number) -> float:
    """-1, 0 or 1 according to the sign of ``x``."""
    if x < 0:
        return -1.0
    if x > 0:
        return 1.0
    return 0.0


def radians(deg: Number) -> float:
    """Degrees to radians."""
    return deg * math.pi / 180.0


def degrees(rad: Number) -> float:
    """Radians to degrees."""
    return rad * 180.0 / math.pi


def dot(a: VectorOrNumber, b: VectorOrNumber) -> Number:
    """Dot product; for two numbers, their product."""
    if isinstance(a, Vector) and isinstance(b, Vector):
        return sum(x * y for x, y in a._zip(b))
    if isinstance(a, Vector) or isinstance(b, Vector):
        raise TypeError("dot needs two vectors or two numbers")
    return a * b


def length(v: Vector) -> float:
    """Euclidean length."""
    return math.sqrt(dot(v, v))


def normalize(v: Vector) -> Vector:
    """Scale ``v`` to unit length."""
    d = dot(v, v)
    if d == 0:
        raise ZeroDivisionError("cannot normalize a zero-length vector")
    return v * (1.0 / math.sqrt(d))


def reflect(i: Vector, n: Vector) -> Vector:
    """Reflect ``i`` about the normal ``n``."""
    return i - 2.0 * n * dot(n, i)


def cross(a: Vector, b: Vector) -> Vector:
    """Cross product of two three-component vectors."""
    if len(a) != 3 or len(b) != 3:
        raise ValueError("cross product needs two 3-component vectors")
    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def vfloor(v: Vector) -> Vector:
    """Component-wise floor, keeping floating-point components."""
    return Vector(*(float(math.floor(c)) for c in v))


def vabs(v: Vector) -> Vector:
    """Component-wise absolute value."""
    return Vector(*(abs(c) for c in v))


def vmin(a: Vector, b: Vector) -> Vector:
    """Component-wise minimum."""
    return Vector(*(_fmin(x, y) for x, y in a._zip(b)))


def vmax(a: Vector, b: Vector) -> Vector:
    """Component-wise maximum."""
    return Vector(*(_fmax(x, y) for x, y in a._zip(b)))