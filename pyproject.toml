[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eulerkit"
version = "0.1.0"
description = "Number-theory helpers and solutions to Project Euler problems 1 to 10 and 16 to 31"
requires-python = ">=3.10"
dependencies = []
keywords = ["project-euler", "primes", "number-theory", "combinatorics", "math"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eulerkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
