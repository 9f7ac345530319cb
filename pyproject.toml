[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexstore"
version = "0.1.0"
description = "A small product catalogue built around ports and adapters: domain rules, SQLite storage, a command line and a JSON HTTP API."
requires-python = ">=3.10"
keywords = ["products", "catalogue", "hexagonal", "ports-and-adapters", "sqlite", "wsgi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hexstore = "hexstore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hexstore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
