[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metodos-numericos"
version = "0.1.0"
description = "Root finding (bisection, false position, Newton-Raphson) and Gauss-Seidel for linear systems, with a small expression evaluator and symbolic differentiator."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical methods",
    "bisection",
    "false position",
    "regula falsi",
    "newton-raphson",
    "gauss-seidel",
    "root finding",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
metodos-numericos = "metodos_numericos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["metodos_numericos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
