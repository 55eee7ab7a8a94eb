[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heurograph"
version = "0.1.0"
description = "Graph algorithms and search heuristics: Hamiltonian cycles, bastion route planning, shortest paths, MST and SCCs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "heuristics",
    "simulated-annealing",
    "hill-climbing",
    "backtracking",
    "hamiltonian-cycle",
    "dijkstra",
    "kruskal",
    "kosaraju",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Environment :: Console",
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

[project.scripts]
heurograph-bastions = "heurograph.bastions:main"
heurograph-hamiltonian = "heurograph.hamiltonian:main"
heurograph-graph = "heurograph.graph:main"

[tool.hatch.build.targets.wheel]
packages = ["heurograph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
