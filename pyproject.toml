[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuzzertui"
version = "0.1.0"
description = "Terminal front end for creating, opening and configuring fuzzing projects"
requires-python = ">=3.10"
dependencies = []
keywords = ["fuzzing", "tui", "terminal", "curses", "project", "corpus"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fuzzertui = "fuzzertui.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fuzzertui"]

[tool.pytest.ini_options]
addopts = "-ra"
