[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "campusnav"
version = "0.1.0"
description = "Campus navigation on a weighted location graph: shortest paths, spanning trees, Euler circuits and visit planning"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "navigation",
    "shortest-path",
    "dijkstra",
    "minimum-spanning-tree",
    "euler-circuit",
    "campus",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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

[project.scripts]
campusnav = "campusnav.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["campusnav"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
