[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advect1d"
version = "0.1.0"
description = "One-dimensional linear advection solved with central differences and classical Runge-Kutta 4"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["advection", "finite-differences", "runge-kutta", "pde", "numerical-methods"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
test = [
    "pytest",
]

[project.scripts]
advect1d = "advect1d.solver:main"

[tool.hatch.build.targets.wheel]
packages = ["advect1d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
