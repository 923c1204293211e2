[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roadtrip"
version = "0.1.0"
description = "Shortest travel-time routes between cities with Dijkstra and A* search"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "shortest-path", "dijkstra", "a-star", "routing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
roadtrip-dijkstra = "roadtrip.dijkstra:main"
roadtrip-astar = "roadtrip.astar:main"
roadtrip-visualize = "roadtrip.visualize:main"

[tool.hatch.build.targets.wheel]
packages = ["roadtrip"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
