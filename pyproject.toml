[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kutuphane"
version = "0.1.0"
description = "Small library management system: books, members, loans and returns with late fines, stored in SQLite."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "loans", "members", "sqlite", "fines"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Turkish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kutuphane = "kutuphane.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kutuphane"]

[tool.hatch.build.targets.sdist]
include = ["kutuphane", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
