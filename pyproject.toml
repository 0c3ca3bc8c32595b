[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numericlib"
version = "0.1.0"
description = "Small numerical methods library: integration, interpolation, linear systems, root finding, ODEs and least-squares approximation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "integration",
    "quadrature",
    "interpolation",
    "linear-systems",
    "root-finding",
    "ode",
    "approximation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numericlib = "numericlib.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numericlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
