[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "itmostd"
version = "0.1.0"
description = "Standard library of built-in functions for the ItmoScript language: numbers, strings, lists, I/O and files."
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "scripting", "stdlib", "builtins", "itmoscript"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["itmostd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
