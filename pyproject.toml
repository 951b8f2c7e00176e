[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circlekit"
version = "0.1.0"
description = "Algebraic circle fitting in 2D and 3D, with point-file readers and a small binary search tree"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = [
    "circle fitting",
    "kasa",
    "pratt",
    "taubin",
    "hyper fit",
    "least squares",
    "rodrigues rotation",
    "binary search tree",
]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
circlekit-benchmark = "circlekit.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["circlekit"]

[tool.pytest.ini_options]
addopts = "-ra"
