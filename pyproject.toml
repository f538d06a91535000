[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adjgraph"
version = "0.1.0"
description = "Weighted graphs on an adjacency matrix, with FS/APS and adjacency-list representations"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "adjacency matrix", "fs aps", "directed graph", "undirected graph"]
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

[tool.hatch.build.targets.wheel]
packages = ["adjgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
