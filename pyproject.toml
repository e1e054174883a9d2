[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cellwidgets"
version = "0.1.0"
description = "Terminal widgets on a character-cell screen: frames, lists, pages and grid layout arithmetic"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["terminal", "tui", "widgets", "layout", "list", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cellwidgets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
