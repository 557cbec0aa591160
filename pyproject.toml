[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslabs"
version = "0.1.0"
description = "Console workbenches for classic data structures: queues, file trees, word indexes and graphs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "queue",
    "binary search tree",
    "avl tree",
    "hash table",
    "graph",
    "simulation",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dslabs-queues = "dslabs.queues.cli:main"
dslabs-filetree = "dslabs.filetree.cli:main"
dslabs-filetree-gen = "dslabs.filetree.datagen:main"
dslabs-wordindex = "dslabs.wordindex.cli:main"
dslabs-graph = "dslabs.graphs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dslabs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
