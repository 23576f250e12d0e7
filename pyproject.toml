[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilemerge"
version = "0.1.0"
description = "A sliding-tile number merging puzzle with a persistent best score"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "puzzle", "2048", "tiles", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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
tilemerge = "tilemerge.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tilemerge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
