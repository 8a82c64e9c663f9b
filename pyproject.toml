[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bunnyquest"
version = "1.0.0"
description = "Text, byte-buffer, linked-list and line-reading helpers for a small tile-based puzzle game."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "strings", "buffers", "linked list", "line reader"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bunnyquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
