[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuzzypick"
version = "0.1.0"
description = "Interactive terminal fuzzy finder for files in a directory tree"
requires-python = ">=3.10"
keywords = ["fuzzy", "finder", "terminal", "tui", "files", "search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fuzzypick = "fuzzypick.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fuzzypick"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
