[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enhanced_input"
version = "0.16.0"
description = "Input action model: typed action values, state transition events, observers and input bindings"
requires-python = ">=3.10"
keywords = ["input", "actions", "bindings", "game", "events"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enhanced_input"]

[tool.pytest.ini_options]
addopts = "-ra"
