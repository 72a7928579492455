[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unixdemo"
version = "0.1.0"
description = "Small, runnable demonstrations of UNIX process, identity, resource, directory and file I/O system calls"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "unix",
    "posix",
    "system-calls",
    "processes",
    "fork",
    "wait",
    "rlimit",
    "file-descriptors",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: POSIX :: Linux",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
unixdemo-errors = "unixdemo.errors:main"
unixdemo-identity = "unixdemo.identity:main"
unixdemo-resources = "unixdemo.resources:main"
unixdemo-directories = "unixdemo.directories:main"
unixdemo-processes = "unixdemo.processes:main"
unixdemo-fileio = "unixdemo.fileio:main"

[tool.hatch.build.targets.wheel]
packages = ["unixdemo"]

[tool.hatch.build.targets.sdist]
include = ["unixdemo", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
