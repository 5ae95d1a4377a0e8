[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "beerscli"
version = "0.1.0"
description = "Command-line tools to look up beers from a CSV file, a fixed in-memory list or an HTTP products listing"
requires-python = ">=3.10"
dependencies = []
keywords = ["beer", "catalogue", "cli", "csv", "json", "repository"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
beers-cli = "beerscli.cli:main"
beers-catalog = "beerscli.catalog:main"

[tool.hatch.build.targets.wheel]
packages = ["beerscli"]

[tool.hatch.build.targets.sdist]
include = ["beerscli", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
