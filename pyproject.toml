[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tagalloc"
version = "0.1.0"
description = "A tagged allocation tracker that records buffers and releases them all at once"
requires-python = ">=3.10"
dependencies = []
keywords = ["allocation", "arena", "buffers", "tracking", "tags"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tagalloc-demo = "tagalloc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tagalloc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
