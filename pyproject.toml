[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spro"
version = "0.1.0"
description = "A command-line timer that tracks study sessions and keeps a daily log of time spent"
requires-python = ">=3.10"
dependencies = []
keywords = ["timer", "study", "time-tracking", "productivity", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spro = "spro.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["spro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
