[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vtermkit"
version = "0.1.0"
description = "Terminal commands as ANSI escape sequences, plus key, mouse and event types with a filtering event reader."
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "ansi", "escape-codes", "cursor", "events", "keyboard", "mouse"]
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
    "Topic :: Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vtermkit"]

[tool.pytest.ini_options]
addopts = "-ra"
