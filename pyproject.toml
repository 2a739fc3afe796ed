[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ltbkit"
version = "0.0.1"
description = "Small utilities: located errors, enum bit flags, durations and timers, guards, JSON settings and GPU enum names."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "errors", "flags", "timers", "json", "settings"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ltbkit"]

[tool.pytest.ini_options]
addopts = "-ra"
