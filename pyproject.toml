[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "dsakit"
version = "0.1.0"
description = "Classic data structures and algorithms: searching, expression conversion, linked lists, search trees and bounded containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "searching", "linked-list", "stack", "queue", "bst", "postfix"]
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
    "Environment :: Console",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsakit = "dsakit.cli:main"

[tool.setuptools.packages.find]
include = ["dsakit*"]

[tool.pytest.ini_options]
addopts = "-ra"
