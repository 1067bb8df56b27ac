[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gocss"
version = "0.1.0"
description = "A small stylesheet parser that maps CSS rules to their style declarations"
requires-python = ">=3.10"
dependencies = []
keywords = ["css", "stylesheet", "parser", "tokenizer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Markup",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gocss"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
