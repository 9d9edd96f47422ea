[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grepkit"
version = "0.1.0"
description = "Search-and-replace building blocks: backreference replacement with case preservation, context striping, replacement application, file renames and overlay button layout."
requires-python = ">=3.10"
dependencies = []
keywords = ["grep", "search", "replace", "regex", "backreference", "text"]
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
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["grepkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
