[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fswatchkit"
version = "0.1.0"
description = "Building blocks for file system watchers: action and error types, synchronisation helpers, UTF conversions and file system queries"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "watcher", "file-events", "utf-8", "utf-16", "unicode", "mount"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fswatchkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
