[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "labengine"
version = "0.1.0"
description = "OBJ mesh loading, binary mesh caching, quadric simplification and editor helpers for a small 3D engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["obj", "mtl", "mesh", "wavefront", "3d", "simplification", "quadric", "viewport", "gizmo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["labengine*"]

[tool.pytest.ini_options]
addopts = "-ra"
