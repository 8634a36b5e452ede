[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plasmakit"
version = "0.1.0"
description = "Building blocks for plasma simulation codes: contexts, buffers, vectors, matrices, index ranges and BLAS-style scaling."
requires-python = ">=3.10"
dependencies = []
keywords = ["plasma", "simulation", "numerics", "blas", "range", "matrix"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["plasmakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
