[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heistkit"
version = "0.1.0"
description = "Game building blocks: colours, cached file loading, event queues, game state, clocks and text layout"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "2d", "colour", "events", "event queue", "text layout", "game clock"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["heistkit"]

[tool.pytest.ini_options]
addopts = "-ra"
