[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oilpool"
version = "0.1.0"
description = "Tic-tac-toe and leaf-growth simulations with a built-in health check suite"
requires-python = ">=3.10"
keywords = ["tictactoe", "simulation", "game", "health-check", "perlin-noise"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "psutil",
    "tabulate",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
oilpool = "oilpool.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["oilpool"]

[tool.pytest.ini_options]
addopts = "-ra"
