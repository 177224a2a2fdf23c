[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edkit"
version = "0.1.0"
description = "Small teaching toolkit: integer exercises, a clock, stacks, queues, an AVL tree and an adjacency-matrix graph."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "data-structures",
    "stack",
    "queue",
    "avl-tree",
    "graph",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
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
edkit = "edkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["edkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
