[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkedstructs"
version = "0.1.0"
description = "Linked lists, stacks, queues, binary trees, binary search trees and B-trees, with a few stack and queue routines"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "stack", "queue", "binary tree", "binary search tree", "b-tree"]
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
packages = ["linkedstructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
