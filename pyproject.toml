[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfdlab"
version = "0.1.0"
description = "Finite-difference solver for the lid-driven cavity on a block-decomposed staggered grid, with parameter-file, PGM and VTK helpers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "cfd",
    "navier-stokes",
    "finite-differences",
    "sor",
    "domain-decomposition",
    "lid-driven-cavity",
    "vtk",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cfdlab-cavity = "cfdlab.cavity.solver:main"

[tool.hatch.build.targets.wheel]
packages = ["cfdlab"]

[tool.pytest.ini_options]
addopts = "-ra"
