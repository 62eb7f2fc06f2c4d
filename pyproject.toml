[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamesolver"
version = "0.1.0"
description = "Models of combinatorial games (Nim, Chomp, Domineering, Reversi, Sprouts, Order and Chaos, Tic Tac Toe, Zener) and building blocks for analysing them."
requires-python = ">=3.10"
dependencies = []
keywords = ["combinatorial games", "game theory", "nim", "nimbers", "board games"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gamesolver = "gamesolver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gamesolver"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
