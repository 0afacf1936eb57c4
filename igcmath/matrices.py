"""Column-major 2x2, 3x3 and 4x4 float matrices."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator

from igcmath.vectors import Vec2, Vec3, Vec4


class SingularMatrixError(ArithmeticError):
    """Raised when a matrix that must be invertible is singular."""


def _determinant(rows: list[list[float]]) -> float:
    """Determinant by cofactor expansion along the first row."""
    if len(rows) == 1:
        return rows[0][0]
    if len(rows) == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    total = 0.0
    for j, value in enumerate(rows[0]):
        minor = [row[:j] + row[j + 1:] for row in rows[1:]]
        sign = -1.0 if j % 2 else 1.0
        total += sign * value * _determinant(minor)
    return total


def _identity_entries(n: int) -> tuple[float, ...]:
    return tuple(1.0 if i == j else 0.0 for j in range(n) for i in range(n))


def _transposed_entries(entries: tuple[float, ...], n: int) -> tuple[float, ...]:
    return tuple(entries[n * i + j] for j in range(n) for i in range(n))


class _SquareMatrix:
    """Shared arithmetic of the square matrix types.

    Entries are stored column-major, as in OpenGL and GLSL.
    """

    __slots__ = ("_entries",)
    _N = 0
    _VEC: type = Vec2

    def __init__(self, *entries: float) -> None:
        if len(entries) == 1 and not isinstance(entries[0], Real):
            entries = tuple(entries[0])
        if len(entries) != self._N * self._N:
            raise ValueError(
                f"{type(self).__name__} takes {self._N * self._N} entries, got {len(entries)}"
            )
        self._entries = tuple(float(e) for e in entries)

    @property
    def entries(self) -> tuple[float, ...]:
        """All entries in column-major order."""
        return self._entries

    def __iter__(self) -> Iterator[float]:
        return iter(self._entries)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._entries))

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self._entries!r}"

    def __str__(self) -> str:
        n = self._N
        texts = [f"{e:f}" for e in self._entries]
        width = max(len(t) for t in texts)
        lines = []
        for i in range(n):
            parts = ["|"]
            for j in range(n):
                text = texts[n * j + i]
                parts.append(text)
                if j < n - 1:
                    parts.append(",")
                parts.append(" " * (width - len(text)))
            parts.append("|\n")
            lines.append("".join(parts))
        return "".join(lines)

    def _at(self, i: int, j: int) -> float:
        return self._entries[self._N * j + i]

    def _rows(self) -> list[list[float]]:
        n = self._N
        return [[self._at(i, j) for j in range(n)] for i in range(n)]

    def _scaled(self, r: float):
        return type(self)(*(r * e for e in self._entries))

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self._entries, other._entries)))

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self._entries, other._entries)))

    def __neg__(self):
        return self._scaled(-1.0)

    def __mul__(self, other):
        n = self._N
        if type(other) is type(self):
            return type(self)(
                *(
                    sum(self._at(i, k) * other._at(k, j) for k in range(n))
                    for j in range(n)
                    for i in range(n)
                )
            )
        if isinstance(other, self._VEC):
            v = tuple(other)
            return self._VEC(
                *(sum(self._at(i, k) * v[k] for k in range(n)) for i in range(n))
            )
        if isinstance(other, Real):
            return self._scaled(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self._scaled(other)
        return NotImplemented

    def __matmul__(self, other):
        if type(other) is type(self) or isinstance(other, self._VEC):
            return self.__mul__(other)
        return NotImplemented


class Mat2(_SquareMatrix):
    """Column-major 2x2 matrix."""

    __slots__ = ()
    _N = 2
    _VEC = Vec2

    @classmethod
    def from_columns(cls, c0: Vec2, c1: Vec2) -> Mat2:
        """Build from two column vectors."""
        return cls(*c0, *c1)

    @classmethod
    def identity(cls) -> Mat2:
        """The identity matrix."""
        return cls(*_identity_entries(2))

    def entry(self, i: int, j: int) -> float:
        """Entry at row i, column j (zero-based)."""
        return self._entries[2 * j + i]

    def column(self, j: int) -> Vec2:
        """Column j as a vector."""
        return Vec2(*self._entries[2 * j:2 * j + 2])

    def row(self, i: int) -> Vec2:
        """Row i as a vector."""
        return Vec2(self._entries[i], self._entries[2 + i])

    def transpose(self) -> Mat2:
        """The transposed matrix."""
        return Mat2(*_transposed_entries(self._entries, 2))

    def determinant(self) -> float:
        """Determinant."""
        return self.entry(0, 0) * self.entry(1, 1) - self.entry(0, 1) * self.entry(1, 0)

    def trace(self) -> float:
        """Sum of the diagonal entries."""
        return self.entry(0, 0) + self.entry(1, 1)

    def inverse(self) -> Mat2:
        """Inverse matrix; raises SingularMatrixError when the determinant is zero."""
        det = self.determinant()
        if det == 0:
            raise SingularMatrixError("singular matrix in Mat2.inverse")
        return (1.0 / det) * Mat2(
            self.entry(1, 1), -self.entry(1, 0), -self.entry(0, 1), self.entry(0, 0)
        )

    def diagonalize(self) -> tuple[Mat2, Mat2]:
        """Return (eigenvectors as columns, diagonal matrix of eigenvalues).

        The eigenvalues are in increasing order. Raises ValueError when they
        are not real.
        """
        a = self.entry(0, 0)
        b = self.entry(0, 1)
        c = self.entry(1, 0)
        d = self.entry(1, 1)
        discrim = (a + d) * (a + d) - 4 * (a * d - b * c)
        if discrim < 0:
            raise ValueError("matrix has no real eigenvalues")
        half_sqrt_discrim = 0.5 * math.sqrt(discrim)
        base_root = 0.5 * (a + d)
        l1 = base_root - half_sqrt_discrim
        l2 = base_root + half_sqrt_discrim
        values = Mat2(l1, 0.0, 0.0, l2)
        vectors = Mat2.from_columns(
            Vec2(b, l1 - a).normalized(), Vec2(b, l2 - a).normalized()
        )
        return vectors, values


class Mat3(_SquareMatrix):
    """Column-major 3x3 matrix."""

    __slots__ = ()
    _N = 3
    _VEC = Vec3

    @classmethod
    def from_columns(cls, c0: Vec3, c1: Vec3, c2: Vec3) -> Mat3:
        """Build from three column vectors."""
        return cls(*c0, *c1, *c2)

    @classmethod
    def identity(cls) -> Mat3:
        """The identity matrix."""
        return cls(*_identity_entries(3))

    def entry(self, i: int, j: int) -> float:
        """Entry at row i, column j (zero-based)."""
        return self._entries[3 * j + i]

    def column(self, j: int) -> Vec3:
        """Column j as a vector."""
        return Vec3(*self._entries[3 * j:3 * j + 3])

    def row(self, i: int) -> Vec3:
        """Row i as a vector."""
        return Vec3(self._entries[i], self._entries[3 + i], self._entries[6 + i])

    def transpose(self) -> Mat3:
        """The transposed matrix."""
        return Mat3(*_transposed_entries(self._entries, 3))

    def trace(self) -> float:
        """Sum of the diagonal entries."""
        return self.entry(0, 0) + self.entry(1, 1) + self.entry(2, 2)


class Mat4(_SquareMatrix):
    """Column-major 4x4 matrix."""

    __slots__ = ()
    _N = 4
    _VEC = Vec4

    @classmethod
    def row_major(cls, *args: float) -> Mat4:
        """Build from 16 entries given row by row."""
        if len(args) != 16:
            raise ValueError(f"Mat4.row_major takes 16 entries, got {len(args)}")
        return cls(*(args[4 * i + j] for j in range(4) for i in range(4)))

    @classmethod
    def from_columns(cls, c0: Vec4, c1: Vec4, c2: Vec4, c3: Vec4) -> Mat4:
        """Build from four column vectors."""
        return cls(*c0, *c1, *c2, *c3)

    @classmethod
    def rigid(cls, position: Vec3, orientation: Mat3) -> Mat4:
        """Rigid frame-of-reference matrix from a position and an orientation."""
        o = orientation
        return cls(
            o.entry(0, 0), o.entry(1, 0), o.entry(2, 0), 0.0,
            o.entry(0, 1), o.entry(1, 1), o.entry(2, 1), 0.0,
            o.entry(0, 2), o.entry(1, 2), o.entry(2, 2), 0.0,
            position.x, position.y, position.z, 1.0,
        )

    @classmethod
    def identity(cls) -> Mat4:
        """The identity matrix."""
        return cls(*_identity_entries(4))

    def entry(self, i: int, j: int) -> float:
        """Entry at row i, column j (zero-based)."""
        return self._entries[4 * j + i]

    def column(self, j: int) -> Vec4:
        """Column j as a vector."""
        return Vec4(*self._entries[4 * j:4 * j + 4])

    def row(self, i: int) -> Vec4:
        """Row i as a vector."""
        return Vec4(*(self._entries[4 * j + i] for j in range(4)))

    def transpose(self) -> Mat4:
        """The transposed matrix."""
        return Mat4(*_transposed_entries(self._entries, 4))

    def determinant(self) -> float:
        """Determinant."""
        return _determinant(self._rows())

    def trace(self) -> float:
        """Sum of the diagonal entries."""
        return sum(self.entry(i, i) for i in range(4))

    def solve(self, b: Vec4) -> Vec4:
        """Solve ``self * x = b`` for x by Gaussian elimination with partial pivoting."""
        m = self._rows()
        rhs = list(b)
        for col in range(3):
            pivot_row = max(range(col, 4), key=lambda r: abs(m[r][col]))
            if m[pivot_row][col] == 0:
                raise SingularMatrixError("singular matrix in Mat4.solve")
            if pivot_row != col:
                m[pivot_row], m[col] = m[col], m[pivot_row]
                rhs[pivot_row], rhs[col] = rhs[col], rhs[pivot_row]
            inv_pivot = 1.0 / m[col][col]
            rhs[col] *= inv_pivot
            m[col] = [value * inv_pivot for value in m[col]]
            m[col][col] = 1.0
            for row in range(col + 1, 4):
                x = m[row][col]
                m[row] = [a - x * p for a, p in zip(m[row], m[col])]
                m[row][col] = 0.0
                rhs[row] -= x * rhs[col]
        if m[3][3] == 0:
            raise SingularMatrixError("singular matrix in Mat4.solve")
        rhs[3] /= m[3][3]

        solution = [0.0] * 4
        for i in reversed(range(4)):
            solution[i] = rhs[i] - sum(m[i][k] * solution[k] for k in range(i + 1, 4))
        return Vec4(*solution)

    def inverse(self) -> Mat4:
        """Inverse matrix; raises SingularMatrixError when there is none."""
        units = (Vec4(*(1.0 if k == i else 0.0 for k in range(4))) for i in range(4))
        return Mat4.from_columns(*(self.solve(e) for e in units))

    def top_left(self) -> Mat3:
        """The upper-left 3x3 block."""
        return Mat3(*(self.entry(i, j) for j in range(3) for i in range(3)))

    @classmethod
    def translation(cls, *args) -> Mat4:
        """Translation by a Vec3 or by x, y, z."""
        if len(args) == 1:
            x, y, z = args[0]
        elif len(args) == 3:
            x, y, z = args
        else:
            raise TypeError("translation takes a Vec3 or three numbers")
        return cls.row_major(
            1, 0, 0, x,
            0, 1, 0, y,
            0, 0, 1, z,
            0, 0, 0, 1,
        )

    @classmethod
    def scale(cls, x: float, y: float | None = None, z: float | None = None) -> Mat4:
        """Axis scaling; with one argument the scale is uniform."""
        if y is None and z is None:
            y = z = x
        elif y is None or z is None:
            raise TypeError("scale takes one or three numbers")
        return cls.row_major(
            x, 0, 0, 0,
            0, y, 0, 0,
            0, 0, z, 0,
            0, 0, 0, 1,
        )

    @classmethod
    def to_rigid_frame(cls, origin: Vec3, x_axis: Vec3, y_axis: Vec3, z_axis: Vec3) -> Mat4:
        """Map world coordinates into the orthonormal frame at origin."""
        return cls.row_major(
            x_axis.x, x_axis.y, x_axis.z, 0,
            y_axis.x, y_axis.y, y_axis.z, 0,
            z_axis.x, z_axis.y, z_axis.z, 0,
            0, 0, 0, 1,
        ) * cls.translation(-origin)

    @classmethod
    def orthogonal_projection(
        cls,
        min_x: float,
        max_x: float,
        min_y: float,
        max_y: float,
        min_z: float,
        max_z: float,
    ) -> Mat4:
        """Axis-aligned projection mapping the given ranges onto [-1, 1]."""
        return cls.row_major(
            2.0 / (max_x - min_x), 0, 0, 0,
            0, 2.0 / (max_y - min_y), 0, 0,
            0, 0, 2.0 / (max_z - min_z), 0,
            0, 0, 0, 1,
        ) * cls.translation(
            Vec3(
                -0.5 * (min_x + max_x),
                -0.5 * (min_y + max_y),
                -0.5 * (min_z + max_z),
            )
        )


def outer(a: Vec3, b: Vec3) -> Mat3:
    """Outer product: the matrix with entry (i, j) equal to a[i] * b[j]."""
    return Mat3(*(ai * bj for bj in b for ai in a))