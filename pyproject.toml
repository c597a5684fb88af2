[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "congo"
version = "0.1.0"
description = "A Congo board game engine with move generation, evaluation and an alpha-beta search agent"
requires-python = ">=3.10"
dependencies = []
keywords = ["congo", "board-game", "game-engine", "minimax", "alpha-beta"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
congo = "congo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["congo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
