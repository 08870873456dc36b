[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eostui"
version = "0.1.0"
description = "ANSI-aware text layout, styles, log overlay, topology and shell helpers for an EOS cluster terminal interface"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["eos", "storage", "cluster", "tui", "terminal", "ansi", "logs"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["eostui"]

[tool.hatch.build.targets.sdist]
include = [
    "eostui",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
