[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "combopt"
version = "0.1.0"
description = "Independent-set graph coloring heuristics, maximum clique search and sparse unate-covering matrices"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph coloring",
    "independent set",
    "max clique",
    "set covering",
    "unate covering",
    "combinatorial optimization",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
packages = ["combopt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
