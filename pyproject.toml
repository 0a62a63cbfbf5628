[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datastructs"
version = "0.1.0"
description = "Integer stacks, a growable array and linked lists, with classic exercises solved on them"
requires-python = ">=3.10"
dependencies = []
keywords = ["stack", "linked list", "doubly linked list", "vector", "data structures", "algorithms"]
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
packages = ["datastructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
