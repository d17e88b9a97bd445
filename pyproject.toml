[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tdalib"
version = "0.1.0"
description = "Stack, queue and singly, circular and doubly linked list types, with an interactive terminal menu"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "stack",
    "queue",
    "linked list",
    "circular list",
    "doubly linked list",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tdalib-menu = "tdalib.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["tdalib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
