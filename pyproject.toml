[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tsp-heuristics"
version = "0.1.0"
description = "Construction and local-search heuristics for the symmetric travelling salesman problem, with a benchmarking harness"
requires-python = ">=3.10"
dependencies = []
keywords = ["tsp", "travelling salesman", "heuristics", "2-opt", "nearest neighbor", "cheapest insertion", "graphs"]
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
tsp-heuristics = "tsp_heuristics.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tsp_heuristics"]

[tool.pytest.ini_options]
addopts = "-ra"
