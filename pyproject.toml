[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ptitalgo"
version = "0.1.0"
description = "Classic algorithm exercises: backtracking, matrix power, disjoint sets, tree traversals, sorting and binary search trees"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "backtracking",
    "n-queens",
    "partitions",
    "disjoint-set",
    "union-find",
    "binary-search-tree",
    "tree-traversal",
    "sorting",
    "inversions",
    "matrix-exponentiation",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ptitalgo-backtrack = "ptitalgo.backtrack:main"
ptitalgo-matrix = "ptitalgo.matrix:main"
ptitalgo-dsu = "ptitalgo.dsu:main"
ptitalgo-traversal = "ptitalgo.traversal:main"
ptitalgo-sorting = "ptitalgo.sorting:main"
ptitalgo-bst = "ptitalgo.bst:main"
ptitalgo-locphat = "ptitalgo.locphat:main"

[tool.hatch.build.targets.wheel]
packages = ["ptitalgo"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
