[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loutil"
version = "0.1.0"
description = "Functional helpers for lists, numbers, strings, timing, retries, debouncing and throttling"
requires-python = ">=3.10"
dependencies = []
keywords = ["functional", "collections", "retry", "debounce", "throttle", "utilities"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["loutil"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
