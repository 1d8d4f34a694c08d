[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "testtalk"
version = "0.1.0"
description = "Small example functions and TTL caches with an injectable clock, built to be tested"
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "examples", "cache", "ttl", "fake-clock"]
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
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["testtalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
