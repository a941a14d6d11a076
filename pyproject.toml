[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "portalpath"
version = "0.1.0"
description = "Decide whether a target point is reachable within an energy and portal budget, using Dijkstra or A* search"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "shortest-path", "dijkstra", "a-star", "portals", "priority-queue"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.scripts]
portalpath = "portalpath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["portalpath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
