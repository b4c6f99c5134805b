[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structlab"
version = "0.1.0"
description = "Classic data structures: queues, stacks, heaps, binary, search and AVL trees, and string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "queue",
    "deque",
    "stack",
    "heap",
    "binary tree",
    "bst",
    "avl",
    "strings",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["structlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
