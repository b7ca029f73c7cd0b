[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rgitkit"
version = "1.0.0"
description = "Text, display and Git-related helper utilities for command-line Git tools"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["git", "cli", "vcs", "terminal", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rgitkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
