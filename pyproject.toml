[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zognorp"
version = "0.1.0"
description = "A small backtracking Sudoku solver that tries the most constrained cells first"
requires-python = ">=3.10"
dependencies = []
keywords = ["sudoku", "solver", "puzzle", "backtracking"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zognorp = "zognorp.main:main"

[tool.hatch.build.targets.wheel]
packages = ["zognorp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
