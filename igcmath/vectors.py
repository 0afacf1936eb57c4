"""Small fixed-size float vectors: Vec2, Vec3 and Vec4."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass, fields
from numbers import Real
from typing import Iterable, Iterator


def _dot(u: Iterable[float], v: Iterable[float]) -> float:
    return sum(a * b for a, b in zip(u, v))


def _length(v: Iterable[float]) -> float:
    return math.sqrt(sum(a * a for a in v))


def _uniform(low: float, high: float) -> float:
    return low + (high - low) * _random.random()


class _Vector:
    """Shared componentwise operators for the concrete vector types."""

    __slots__ = ()

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, f.name) for f in fields(self))

    def __len__(self) -> int:
        return len(fields(self))

    def __getitem__(self, index: int) -> float:
        return tuple(self)[index]

    def _map(self, func):
        return type(self)(*(func(a) for a in self))

    def _zip(self, other, func):
        return type(self)(*(func(a, b) for a, b in zip(self, other)))

    def _same(self, other) -> bool:
        return type(other) is type(self)

    def __neg__(self):
        return self._map(lambda a: -a)

    def __abs__(self):
        return self._map(abs)

    def __add__(self, other):
        if not self._same(other):
            return NotImplemented
        return self._zip(other, lambda a, b: a + b)

    def __sub__(self, other):
        if not self._same(other):
            return NotImplemented
        return self._zip(other, lambda a, b: a - b)

    def __mul__(self, other):
        if self._same(other):
            return self._zip(other, lambda a, b: a * b)
        if isinstance(other, Real):
            return self._map(lambda a: other * a)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self._map(lambda a: other * a)
        return NotImplemented

    def __truediv__(self, other):
        if self._same(other):
            return self._zip(other, lambda a, b: a / b)
        if isinstance(other, Real):
            return self._map(lambda a: a / other)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, Real):
            return self._map(lambda a: other / a)
        return NotImplemented

    # Comparisons hold only when they hold for every component.
    def __lt__(self, other):
        if not self._same(other):
            return NotImplemented
        return all(a < b for a, b in zip(self, other))

    def __le__(self, other):
        if not self._same(other):
            return NotImplemented
        return all(a <= b for a, b in zip(self, other))

    def __gt__(self, other):
        if not self._same(other):
            return NotImplemented
        return all(a > b for a, b in zip(self, other))

    def __ge__(self, other):
        if not self._same(other):
            return NotImplemented
        return all(a >= b for a, b in zip(self, other))

    def __str__(self) -> str:
        return "(" + ", ".join(f"{a:.4g}" for a in self) + ")"


@dataclass(frozen=True, slots=True)
class Vec2(_Vector):
    """Two-component vector. ``u * v`` is the dot product."""

    x: float
    y: float

    def __mul__(self, other):
        if isinstance(other, Vec2):
            return self.dot(other)
        return _Vector.__mul__(self, other)

    @classmethod
    def zero(cls) -> Vec2:
        """The zero vector."""
        return cls(0.0, 0.0)

    def dot(self, other: Vec2) -> float:
        """Dot product."""
        return _dot(self, other)

    def cross(self, other: Vec2) -> float:
        """Scalar cross product (x right, y up)."""
        return self.x * other.y - other.x * self.y

    def perp(self) -> Vec2:
        """Anticlockwise quarter-turn."""
        return Vec2(-self.y, self.x)

    def length(self) -> float:
        """Euclidean length."""
        return _length(self)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; raises ZeroDivisionError for zero."""
        inv_length = 1.0 / self.length()
        return Vec2(inv_length * self.x, inv_length * self.y)

    @classmethod
    def random(cls, low: float, high: float) -> Vec2:
        """A vector with entries drawn uniformly from [low, high)."""
        return cls(_uniform(low, high), _uniform(low, high))

    @staticmethod
    def lerp(a: Vec2, b: Vec2, t: float) -> Vec2:
        """Linear interpolation from a (t=0) to b (t=1)."""
        return Vec2((1 - t) * a.x + t * b.x, (1 - t) * a.y + t * b.y)

    def maximum(self, other: Vec2) -> Vec2:
        """Componentwise maximum."""
        return self._zip(other, lambda a, b: a if a > b else b)

    def minimum(self, other: Vec2) -> Vec2:
        """Componentwise minimum."""
        return self._zip(other, lambda a, b: a if a < b else b)

    def rotate(self, theta: float) -> Vec2:
        """Express this vector in axes rotated anticlockwise by theta."""
        s = math.sin(theta)
        c = math.cos(theta)
        return Vec2(c * self.x + s * self.y, -s * self.x + c * self.y)

    def transform(self, origin: Vec2, theta: float) -> Vec2:
        """Rotate by theta, then offset by origin."""
        return origin + self.rotate(theta)

    def inverse_transform(self, origin: Vec2, theta: float) -> Vec2:
        """Undo :meth:`transform` with the same origin and angle."""
        return (self - origin).rotate(-theta)


@dataclass(frozen=True, slots=True)
class Vec3(_Vector):
    """Three-component vector; ``u * v`` is componentwise."""

    x: float
    y: float
    z: float

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    @classmethod
    def zero(cls) -> Vec3:
        """The zero vector."""
        return cls(0.0, 0.0, 0.0)

    def dot(self, other: Vec3) -> float:
        """Dot product."""
        return _dot(self, other)

    def cross(self, other: Vec3) -> Vec3:
        """Cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Euclidean length."""
        return _length(self)

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; raises ZeroDivisionError for zero."""
        inv_length = 1.0 / self.length()
        return Vec3(inv_length * self.x, inv_length * self.y, inv_length * self.z)

    @classmethod
    def random(cls, low: float, high: float) -> Vec3:
        """A vector with entries drawn uniformly from [low, high)."""
        return cls(_uniform(low, high), _uniform(low, high), _uniform(low, high))

    @staticmethod
    def lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
        """Linear interpolation from a (t=0) to b (t=1)."""
        return Vec3(
            (1 - t) * a.x + t * b.x,
            (1 - t) * a.y + t * b.y,
            (1 - t) * a.z + t * b.z,
        )

    def maximum(self, other: Vec3) -> Vec3:
        """Componentwise maximum."""
        return self._zip(other, lambda a, b: a if a > b else b)

    def minimum(self, other: Vec3) -> Vec3:
        """Componentwise minimum."""
        return self._zip(other, lambda a, b: a if a < b else b)


@dataclass(frozen=True, slots=True)
class Vec4(_Vector):
    """Four-component vector; ``u * v`` is componentwise."""

    x: float
    y: float
    z: float
    w: float

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    @property
    def a(self) -> float:
        return self.w

    @classmethod
    def zero(cls) -> Vec4:
        """The zero vector."""
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def origin(cls) -> Vec4:
        """The homogeneous origin (0, 0, 0, 1)."""
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_vec3(cls, v: Vec3, w: float) -> Vec4:
        """Extend a Vec3 with a fourth component."""
        return cls(v.x, v.y, v.z, w)

    def dot(self, other: Vec4) -> float:
        """Dot product."""
        return _dot(self, other)

    def length(self) -> float:
        """Euclidean length."""
        return _length(self)

    def normalized(self) -> Vec4:
        """Unit vector in the same direction; raises ZeroDivisionError for zero."""
        inv_length = 1.0 / self.length()
        return Vec4(
            inv_length * self.x,
            inv_length * self.y,
            inv_length * self.z,
            inv_length * self.w,
        )

    @classmethod
    def random(cls, low: float, high: float) -> Vec4:
        """A vector with entries drawn uniformly from [low, high)."""
        return cls(*(_uniform(low, high) for _ in range(4)))

    def xyz(self) -> Vec3:
        """The first three components."""
        return Vec3(self.x, self.y, self.z)