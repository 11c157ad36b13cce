[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestlib"
version = "0.1.0"
description = "Data structures and tree and graph algorithms for competitive programming"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "competitive-programming",
    "segment-tree",
    "sparse-table",
    "union-find",
    "link-cut-tree",
    "euler-tour",
    "strongly-connected-components",
    "topological-sort",
    "lca",
    "binary-lifting",
    "matrix",
    "coordinate-compression",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["contestlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
