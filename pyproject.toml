[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "looneygrep"
version = "0.1.0"
description = "A command-line search tool with web page support, context lines, syntax highlighting and interactive replace."
requires-python = ">=3.10"
keywords = ["search", "grep", "cli", "replace", "web"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]
dependencies = [
    "pygments",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lg = "looneygrep.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["looneygrep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
