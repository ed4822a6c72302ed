[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "indexset"
version = "0.1.0"
description = "A hash set that keeps a consistent, index-addressable order of its values"
requires-python = ">=3.10"
dependencies = []
keywords = ["set", "ordered", "indexed", "collection", "insertion-order"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["indexset"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
