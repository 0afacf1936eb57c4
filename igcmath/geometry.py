"""Spheres, boxes, frustums and rays, with simple intersection tests."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from igcmath.matrices import Mat3, Mat4
from igcmath.vectors import Vec3


def clamp(x, low, high):
    """Restrict x to the range [low, high]."""
    if x < low:
        return low
    if x > high:
        return high
    return x


def between(x: float, minimum: float, maximum: float) -> bool:
    """Whether minimum <= x <= maximum."""
    return minimum <= x <= maximum


def strictly_between(x: float, minimum: float, maximum: float) -> bool:
    """Whether minimum < x < maximum."""
    return minimum < x < maximum


def saturate(x: float, minimum: float, maximum: float) -> float:
    """Restrict x to the range [minimum, maximum]."""
    return clamp(x, minimum, maximum)


def _near_box(point: Vec3, mins: Vec3, maxs: Vec3, radius: float) -> bool:
    return all(
        between(p, lo - radius, hi + radius) for p, lo, hi in zip(point, mins, maxs)
    )


@dataclass(frozen=True)
class Sphere:
    origin: Vec3
    radius: float

    def approx_intersects(self, shape) -> bool:
        """Conservative intersection test against a box or a frustum."""
        if isinstance(shape, BoundingBox):
            return _near_box(self.origin, shape.mins, shape.maxs, self.radius)
        if isinstance(shape, OrientedBox):
            local = shape.orientation.transpose() * self.origin
            return _near_box(local, shape.mins, shape.maxs, self.radius)
        if isinstance(shape, Frustum):
            return self._approx_intersects_frustum(shape)
        raise TypeError(f"cannot intersect a sphere with {type(shape).__name__}")

    def _approx_intersects_frustum(self, frustum: Frustum) -> bool:
        corners = ((-1, -1), (1, -1), (1, 1), (-1, 1))
        far_quad = [frustum.point(x, y, 1) for x, y in corners]
        near_quad = [frustum.point(x, y, 0) for x, y in corners]
        planes = []
        for index, (near, far) in enumerate(zip(near_quad, far_quad)):
            following = near_quad[(index + 1) % 4]
            planes.append((near, (far - near).cross(following - near).normalized()))
        forward = frustum.orientation * Vec3(0, 0, 1)
        planes.append((near_quad[0], forward))
        planes.append((far_quad[0], -forward))
        return all((self.origin - point).dot(normal) <= self.radius for point, normal in planes)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box; the default box is empty."""

    mins: Vec3 = field(default_factory=lambda: Vec3(math.inf, math.inf, math.inf))
    maxs: Vec3 = field(default_factory=lambda: Vec3(-math.inf, -math.inf, -math.inf))

    @classmethod
    def from_points(cls, points: Iterable[Vec3]) -> BoundingBox:
        """Smallest box holding all the points."""
        box = cls()
        mins, maxs = box.mins, box.maxs
        for p in points:
            mins = mins.minimum(p)
            maxs = maxs.maximum(p)
        return cls(mins, maxs)

    def extents(self) -> Vec3:
        """Side lengths."""
        return self.maxs - self.mins

    def bounding_sphere(self) -> Sphere:
        """Sphere through the corners, centred on the box."""
        origin = 0.5 * self.mins + 0.5 * self.maxs
        return Sphere(origin, (0.5 * self.extents()).length())

    def contains(self, p: Vec3) -> bool:
        """Whether p lies in the box, boundary included."""
        return self.mins <= p <= self.maxs


@dataclass(frozen=True)
class OrientedBox:
    """Box with bounds given in the frame of an orientation matrix."""

    mins: Vec3 = field(default_factory=lambda: Vec3(math.inf, math.inf, math.inf))
    maxs: Vec3 = field(default_factory=lambda: Vec3(-math.inf, -math.inf, -math.inf))
    orientation: Mat3 = field(default_factory=Mat3.identity)

    def extents(self) -> Vec3:
        """Side lengths."""
        return self.maxs - self.mins

    def contains(self, p: Vec3) -> bool:
        """Whether p lies in the box, boundary included."""
        local = self.orientation.transpose() * p
        return self.mins <= local <= self.maxs


@dataclass(frozen=True)
class Frustum:
    """Viewing frustum extending along the local negative z axis.

    ``half_w`` and ``half_h`` are the half-extents at the near plane, and
    the orientation is assumed orthonormal.
    """

    position: Vec3
    orientation: Mat3
    n: float
    f: float
    half_w: float
    half_h: float

    def point(self, x: float, y: float, z: float) -> Vec3:
        """World point for frustum coordinates.

        z runs from 0 at the near plane to 1 at the far plane; x and y run
        from -1 to 1 across the frustum at that depth.
        """
        ratio = self.f / self.n
        px = (x * self.half_w) * (1 - z) + (x * self.half_w * ratio) * z
        py = (y * self.half_h) * (1 - z) + (y * self.half_h * ratio) * z
        pz = -((1 - z) * self.n + z * self.f)
        return self.position + self.orientation * Vec3(px, py, pz)

    def view_matrix(self) -> Mat4:
        """World-to-camera matrix."""
        return Mat4.rigid(self.position, self.orientation).inverse()

    def projection_matrix(self) -> Mat4:
        """Map the frustum onto -1 <= x, y <= 1, 0 <= z <= 1."""
        n, f = self.n, self.f
        return Mat4(
            (f - n) / (f * self.half_w), 0, 0, 0,
            0, (f - n) / (f * self.half_h), 0, 0,
            0, 0, -1 / n, (-f + n) / (f * n),
            0, 0, -1, 0,
        )

    def matrix(self) -> Mat4:
        """Full view-projection matrix."""
        return self.projection_matrix() * self.view_matrix()


@dataclass
class Ray:
    origin: Vec3
    direction: Vec3

    def normalize(self) -> None:
        """Make the direction a unit vector."""
        self.direction = self.direction.normalized()

    def intersect(self, sphere: Sphere) -> Vec3 | None:
        """Point where the ray meets the sphere, or None when it misses."""
        d = self.origin - sphere.origin
        a = self.direction.dot(self.direction)
        b = 2 * self.direction.dot(d)
        c = d.dot(d) - sphere.radius
        discrim = b * b - 4 * a * c
        if discrim < 0:
            return None
        sqrt_discrim = math.sqrt(discrim)
        inv_2a = 1.0 / (2 * a)
        t = (-b + sqrt_discrim) * inv_2a
        if t < 0:
            t = (-b - sqrt_discrim) * inv_2a
            if t < 0:
                return None
        return self.origin + t * self.direction

    def __str__(self) -> str:
        return f"Ray({self.origin} -> {self.direction})"