[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "depgraph-social"
version = "0.1.0"
description = "Incremental computation nodes for a social network top-posts query, with small numeric, sequence and order-book examples"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "incremental computation",
    "dependency graph",
    "social network",
    "top posts",
    "csv",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["depgraph_social"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
