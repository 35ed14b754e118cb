[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzledays"
version = "0.1.0"
description = "Solvers for a series of daily programming puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "algorithms", "grid", "pathfinding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["puzzledays"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
