[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rdump"
version = "0.1.4"
description = "File predicates: extension, name, path, parent directory, size, modification time, substring and regex matching."
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "file", "predicates", "glob", "filter"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rdump"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
