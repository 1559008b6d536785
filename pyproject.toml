[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chefsolve"
version = "0.1.0"
description = "Solutions to short competitive-programming problems, as functions and a command-line runner"
requires-python = ">=3.10"
keywords = ["competitive-programming", "puzzles", "algorithms", "practice"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chefsolve = "chefsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chefsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
