"""Vectors, matrices, quaternions, geometry and input event types for 3D graphics."""

__version__ = "0.1.0"
__all__ = ["vectors", "matrices", "quaternion", "geometry", "events"]