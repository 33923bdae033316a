[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "configlayers"
version = "0.1.0"
description = "Building blocks for application configuration: format codecs, codec registries, case-insensitive key maps, config file discovery and flags."
requires-python = ">=3.11"
dependencies = [
    "pyyaml",
]
keywords = [
    "configuration",
    "config",
    "settings",
    "yaml",
    "toml",
    "ini",
    "dotenv",
    "properties",
    "json",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["configlayers"]

[tool.hatch.build.targets.sdist]
include = [
    "configlayers",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
