[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yush"
version = "0.6.5"
description = "A small interactive command shell with variables, aliases, functions and history"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "interpreter", "repl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yush = "yush.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["yush"]

[tool.pytest.ini_options]
addopts = "-ra"
