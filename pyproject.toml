[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pedadb"
version = "0.1.0"
description = "Catalog, schema, field and row serialization primitives for a small teaching database engine."
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "catalog", "schema", "serialization", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pedadb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
