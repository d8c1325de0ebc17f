[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "langsniff"
version = "0.1.0"
description = "Detect the natural language and writing script of a piece of text."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "language",
    "language-detection",
    "script-detection",
    "nlp",
    "linguistics",
    "iso-639-3",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
langsniff = "langsniff.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["langsniff"]

[tool.hatch.build.targets.sdist]
include = ["langsniff", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP", "SIM"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
check_untyped_defs = true
