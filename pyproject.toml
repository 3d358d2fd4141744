[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "civokit"
version = "0.1.0"
description = "Terminal helpers for cloud command-line tools: coloured messages, confirmations, tabular and JSON output, and kubeconfig handling"
requires-python = ">=3.10"
keywords = ["cli", "terminal", "kubernetes", "kubeconfig", "output", "table", "json", "confirmation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["civokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
