[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlab"
version = "0.1.0"
description = "Small numerical methods: quadrature, FFT, root finding, sorting and searching, relaxation solvers and molecular dynamics"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "numerical methods",
    "fft",
    "gauss-legendre",
    "quadrature",
    "lagrange interpolation",
    "multigrid",
    "jacobi",
    "poisson",
    "root finding",
    "molecular dynamics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
numlab-legendre = "numlab.legendre:main"
numlab-quadrature = "numlab.quadrature:main"
numlab-fft = "numlab.fft:main"
numlab-lagrange = "numlab.interpolation:main"
numlab-findiff = "numlab.finitediff:main"
numlab-recursion = "numlab.recursion:main"
numlab-roots = "numlab.rootfind:main"
numlab-timing = "numlab.timing:main"
numlab-search = "numlab.search:main"
numlab-integrate = "numlab.integration:main"
numlab-md = "numlab.md:main"
numlab-multigrid = "numlab.multigrid:main"
numlab-jacobi = "numlab.jacobi:main"
numlab-poisson2d = "numlab.poisson2d:main"

[tool.hatch.build.targets.wheel]
packages = ["numlab"]

[tool.hatch.build.targets.sdist]
include = [
    "numlab",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
