[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consolegames"
version = "0.1.0"
description = "Terminal games: checkers, tic-tac-toe with a computer opponent, and a three-rotor Enigma-style cipher machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["checkers", "draughts", "tic-tac-toe", "enigma", "cipher", "terminal", "games"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
enigma = "consolegames.enigma:main"
checkers = "consolegames.checkers_main:main"
tictactoe = "consolegames.tictactoe_main:main"

[tool.hatch.build.targets.wheel]
packages = ["consolegames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
