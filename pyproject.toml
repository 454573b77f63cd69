[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdlines"
version = "0.1.0"
description = "Line-by-line reading from file descriptors with per-descriptor buffering, small string helpers and a file-printing command."
requires-python = ">=3.10"
dependencies = []
keywords = ["lines", "file descriptor", "reader", "strings", "text"]
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
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fdlines = "fdlines.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fdlines"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
