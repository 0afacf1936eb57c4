"""Quaternions for representing rotations in three dimensions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from igcmath.matrices import Mat4
from igcmath.vectors import Vec3


@dataclass(frozen=True, slots=True)
class Quaternion:
    """Quaternion ``scalar + i*I + j*J + k*K``."""

    scalar: float
    i: float
    j: float
    k: float

    def __iter__(self) -> Iterator[float]:
        yield self.scalar
        yield self.i
        yield self.j
        yield self.k

    @classmethod
    def identity(cls) -> Quaternion:
        """The identity rotation."""
        return cls(1.0, 0.0, 0.0, 0.0)

    def length(self) -> float:
        """Euclidean norm."""
        return math.sqrt(sum(a * a for a in self))

    def normalized(self) -> Quaternion:
        """Unit quaternion; raises ZeroDivisionError for zero."""
        inv_length = 1.0 / self.length()
        return Quaternion(*(a * inv_length for a in self))

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.scalar, -self.i, -self.j, -self.k)

    def inverse(self) -> Quaternion:
        """Multiplicative inverse: the conjugate over the squared norm."""
        inv_square_length = 1.0 / sum(a * a for a in self)
        return Quaternion(
            self.scalar * inv_square_length,
            -self.i * inv_square_length,
            -self.j * inv_square_length,
            -self.k * inv_square_length,
        )

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            a, b = self, other
            return Quaternion(
                a.scalar * b.scalar - a.i * b.i - a.j * b.j - a.k * b.k,
                a.scalar * b.i + b.scalar * a.i + a.j * b.k - b.j * a.k,
                a.scalar * b.j + b.scalar * a.j - a.i * b.k + b.i * a.k,
                a.scalar * b.k + b.scalar * a.k + a.i * b.j - b.i * a.j,
            )
        if isinstance(other, Vec3):
            rotated = self * Quaternion(0.0, other.x, other.y, other.z) * self.inverse()
            return Vec3(rotated.i, rotated.j, rotated.k)
        return NotImplemented

    def matrix(self) -> Mat4:
        """The 4x4 rotation matrix of this quaternion."""
        inv = self.inverse()
        q1 = self * Quaternion(0, 1, 0, 0) * inv
        q2 = self * Quaternion(0, 0, 1, 0) * inv
        q3 = self * Quaternion(0, 0, 0, 1) * inv
        return Mat4(
            q1.i, q1.j, q1.k, 0,
            q2.i, q2.j, q2.k, 0,
            q3.i, q3.j, q3.k, 0,
            0, 0, 0, 1,
        )

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float | None = None) -> Quaternion:
        """Rotation about an axis.

        With an angle, the axis is taken to be a unit vector. Without one,
        the rotation angle is the axis length.
        """
        if angle is None:
            theta = axis.length()
            if theta == 0:
                return cls.identity()
            inv_length = 1.0 / theta
            sin_half = math.sin(0.5 * theta)
            return cls(
                math.cos(0.5 * theta),
                axis.x * sin_half * inv_length,
                axis.y * sin_half * inv_length,
                axis.z * sin_half * inv_length,
            )
        sin_half = math.sin(0.5 * angle)
        return cls(
            math.cos(0.5 * angle),
            axis.x * sin_half,
            axis.y * sin_half,
            axis.z * sin_half,
        )

    @staticmethod
    def lerp(a: Quaternion, b: Quaternion, t: float) -> Quaternion:
        """Componentwise linear interpolation; the result is not normalized."""
        return Quaternion(*((1 - t) * x + t * y for x, y in zip(a, b)))

    def to_hemisphere(self, other: Quaternion) -> Quaternion:
        """Same rotation, chosen in the hemisphere of ``other``."""
        if sum(a * b for a, b in zip(self, other)) < 0:
            return -self
        return self

    def __str__(self) -> str:
        return "Quaternion(" + ", ".join(f"{a:.4g}" for a in self) + ")"