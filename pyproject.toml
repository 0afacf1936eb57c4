[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "igcmath"
version = "0.1.0"
description = "Vectors, matrices, quaternions, bounding volumes and input event types for interactive 3D graphics."
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "quaternion", "frustum", "graphics", "input"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["igcmath*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
