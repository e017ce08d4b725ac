[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsrt"
version = "1.3.6"
description = "Runtime pieces of a small JavaScript interpreter: UTF-8 runes and Unicode tables, a regular expression compiler, and value conversions"
requires-python = ">=3.10"
dependencies = []
keywords = ["javascript", "interpreter", "regexp", "utf-8", "ecmascript", "unicode"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsrt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
