[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algocraft"
version = "0.1.0"
description = "Classic algorithms and data structures: graphs, trees, heaps, hashing, coding, clustering and sorting."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "graph",
    "a-star",
    "max-flow",
    "b-tree",
    "fibonacci-heap",
    "huffman",
    "k-means",
    "md5",
    "skip-list",
    "sorting",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algocraft-md5 = "algocraft.md5_cli:main"
algocraft-prime-decompose = "algocraft.prime_decompose:main"

[tool.hatch.build.targets.wheel]
packages = ["algocraft"]

[tool.hatch.build.targets.sdist]
include = ["algocraft", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
