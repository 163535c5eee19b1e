[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsabasics"
version = "0.1.0"
description = "Small, readable implementations of classic data structures and algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "searching",
    "recursion",
    "stack",
    "queue",
    "linked-list",
    "binary-tree",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
dsa-traverse = "dsabasics.arrays:main"
dsa-search = "dsabasics.searching:main"
dsa-sort = "dsabasics.sorting:main"
dsa-factorial = "dsabasics.recursion:main"
dsa-linked-list = "dsabasics.linked_list:main"
dsa-tree = "dsabasics.binary_tree:main"
dsa-stack = "dsabasics.stack:main"
dsa-queue = "dsabasics.array_queue:main"

[tool.hatch.build.targets.wheel]
packages = ["dsabasics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
