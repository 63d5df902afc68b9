[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stewpso"
version = "0.1.0"
description = "Particle swarm optimisation with local search for the stew (incompatible-ingredient knapsack) problem"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "metaheuristic",
    "particle swarm optimisation",
    "pso",
    "knapsack",
    "hill climbing",
    "local search",
    "combinatorial optimisation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
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
stewpso = "stewpso.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stewpso"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
