[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dskit"
version = "0.1.0"
description = "Classic data structures and small algorithms: AVL and binary search trees, graphs, hashing, skip lists, circular lists, a round-robin scheduler and a rating-based recommender."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "avl-tree",
    "binary-search-tree",
    "graph",
    "hash-table",
    "linear-probing",
    "skip-list",
    "circular-linked-list",
    "round-robin",
    "recommender",
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dskit-recommend = "dskit.recommender:main"
dskit-round-robin = "dskit.round_robin:main"

[tool.hatch.build.targets.wheel]
packages = ["dskit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
