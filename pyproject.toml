[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hanoitowers"
version = "0.1.0"
description = "Towers of Hanoi: a terminal puzzle, a step-by-step solver, menu state machines and display layout for a small handheld screen."
requires-python = ">=3.10"
keywords = ["hanoi", "towers", "puzzle", "game", "recursion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hanoi-game = "hanoitowers.cli_game:main"
hanoi-tutorial = "hanoitowers.cli_tutorial:main"

[tool.hatch.build.targets.wheel]
packages = ["hanoitowers"]

[tool.pytest.ini_options]
addopts = "-ra"
