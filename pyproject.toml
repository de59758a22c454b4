[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yapexpr"
version = "0.1.0"
description = "Lazy expression trees built from Python operators, with pattern-matching transforms and evaluation"
requires-python = ">=3.10"
keywords = [
    "expression templates",
    "lazy evaluation",
    "expression trees",
    "transforms",
    "placeholders",
]
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
    "Topic :: Software Development :: Libraries",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["yapexpr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
