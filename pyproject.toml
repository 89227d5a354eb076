[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sharkmaze"
version = "1.0.0"
description = "A small tile-based puzzle game: steer a shark through a maze, eat every fish, then reach the exit."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "puzzle", "maze", "tile", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sharkmaze = "sharkmaze.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sharkmaze"]

[tool.pytest.ini_options]
addopts = "-ra"
