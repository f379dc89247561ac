[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "entropynet"
version = "0.1.0"
description = "Property hashing, property types, a property registry and message framing with zstd compression for entity networking"
requires-python = ">=3.10"
dependencies = [
    "zstandard",
]
keywords = ["networking", "entities", "properties", "serialization", "zstd", "hashing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["entropynet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
