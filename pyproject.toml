[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coffee-automata"
version = "0.1.0"
description = "A finite-state model of a coffee vending machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["finite-state machine", "vending machine", "coffee", "automaton"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coffee-automata = "coffee_automata.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["coffee_automata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
