# igcmath

A small pure-Python toolkit for interactive 3D graphics code. It has no
dependencies outside the standard library.

## Modules

- `igcmath.vectors`: immutable `Vec2`, `Vec3` and `Vec4`. They support
  componentwise `+`, `-`, `*`, `/`, scaling by numbers, `abs()` and
  negation, plus `dot`, `length`, `normalized`, `random(low, high)`,
  `zero()`, and comparisons that hold only when they hold for every
  component. `Vec2 * Vec2` is the dot product. `Vec2` also has `cross`
  (a scalar), `perp`, `rotate`, `transform` and `inverse_transform`.
  `Vec3` has `cross`, `lerp`, `maximum` and `minimum`. `Vec4` has
  `origin()`, `from_vec3(v, w)` and `xyz()`.
- `igcmath.matrices`: column-major `Mat2`, `Mat3` and `Mat4`, with
  `entry(i, j)`, `row`, `column`, `transpose`, `trace`, `identity()`,
  `from_columns(...)`, addition, subtraction, scaling, and multiplication
  by a matrix or a vector (`*` or `@`).
  - `Mat2` adds `determinant`, `inverse` and `diagonalize`, which returns
    `(eigenvectors, eigenvalues)` with the eigenvalues in increasing order.
    It raises `ValueError` when the eigenvalues are not real.
  - `Mat4` adds `determinant`, `solve(b)` (Gaussian elimination with
    partial pivoting), `inverse`, `top_left`, and the builders `row_major`,
    `rigid(position, orientation)`, `translation`, `scale`,
    `to_rigid_frame` and `orthogonal_projection`.
  - `solve`, `Mat4.inverse` and `Mat2.inverse` raise `SingularMatrixError`
    when the matrix is singular.
  - `outer(a, b)` gives the outer product of two `Vec3`s.
- `igcmath.quaternion`: `Quaternion(scalar, i, j, k)`, with the Hamilton
  product, rotation of a `Vec3` (`q * v`), `inverse`, `normalized`,
  `length`, `from_axis_angle`, componentwise `lerp` (not normalized),
  `to_hemisphere`, and `matrix()`, which returns a 4x4 rotation matrix.
- `igcmath.geometry`:
  - `Sphere` with `approx_intersects`, a conservative test against a
    `BoundingBox`, an `OrientedBox` or a `Frustum`.
  - `BoundingBox` with `from_points`, `extents`, `bounding_sphere` and
    `contains`. The default box is empty.
  - `OrientedBox` with `extents` and `contains`.
  - `Frustum` with `point`, `view_matrix`, `projection_matrix` and
    `matrix`. The projection maps the frustum onto x and y in [-1, 1] and
    z in [0, 1].
  - `Ray` with `normalize` and `intersect`. `intersect` returns the point
    where the ray meets a sphere, or `None` when it misses.
  - The helpers `clamp`, `between`, `strictly_between` and `saturate`.
- `igcmath.events`: the enums `Key`, `KeyboardAction`, `MouseAction`,
  `MouseButton` and `WindowEventType`, and the frozen dataclasses
  `KeyboardEvent`, `CursorState`, `MouseEvent` and `WindowEvent`.
  `key_to_char` and `key_from_char` map the letter and digit keys to and
  from lower-case characters. `key_from_char` ignores case. Both raise
  `ValueError` when there is no mapping. A `MouseEvent` for a button press
  or release must name a button.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from igcmath.vectors import Vec3
from igcmath.geometry import BoundingBox, Ray, Sphere

box = BoundingBox.from_points([Vec3(0, 0, 0), Vec3(2, 1, 3)])
print(box.extents())                  # (2, 1, 3)
print(box.contains(Vec3(1, 0.5, 1)))  # True

ray = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
print(ray.intersect(Sphere(Vec3(0, 0, 0), 1.0)))  # a point, or None
```

Matrices are column-major, as in OpenGL. `Mat4.entry(i, j)` is the entry in
row `i`, column `j`. `Mat4.row_major(...)` takes its sixteen numbers in row
order instead.

## What it does not do

This package opens no windows and runs no frame loop. It provides no
dispatcher that delivers input events to handlers, and it does not track
which keys or mouse buttons are held down. `igcmath.events` defines only
the event types. Producing and consuming those events is left to your own
code.