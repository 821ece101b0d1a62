[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "foxcowork"
version = "0.1.0"
description = "Slash commands, settings storage and text rendering for an AI-assisted file management terminal"
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
    "wcwidth",
]
keywords = ["terminal", "chat", "llm", "slash-commands", "sqlite", "settings"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["foxcowork"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
