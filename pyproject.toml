[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eliasfano"
version = "0.1.0"
description = "Elias-Fano encoding of sorted integer sequences, with access and successor queries and benchmarks"
requires-python = ">=3.10"
dependencies = []
keywords = ["elias-fano", "succinct", "compression", "rank", "select", "successor", "data-structures"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
eliasfano-benchmark = "eliasfano.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["eliasfano"]

[tool.pytest.ini_options]
addopts = "-ra"
