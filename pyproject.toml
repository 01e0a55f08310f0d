[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moviechain"
version = "0.1.0"
description = "A movie and review registry kept in an ordered key-value store, with ownership rules, genesis validation and paginated queries."
requires-python = ">=3.10"
keywords = ["movies", "reviews", "key-value store", "ledger", "pagination", "bech32"]
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
    "Topic :: Database",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["moviechain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
