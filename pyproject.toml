[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "dsalgo"
version = "0.1.0"
description = "Classic data structures and algorithms: graphs, hashing, heaps, linked lists, backtracking and array puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "graphs",
    "hashing",
    "heap",
    "linked-list",
    "backtracking",
    "n-queens",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsalgo-stack = "dsalgo.stack:main"
dsalgo-palindrome = "dsalgo.text:main"

[tool.setuptools.packages.find]
include = ["dsalgo*"]

[tool.pytest.ini_options]
addopts = "-ra"
