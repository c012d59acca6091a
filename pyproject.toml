[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "towerdef"
version = "0.1.0"
description = "Game logic for a grid-based tower defense game: flow-field maps, critters, waves, towers and projectiles."
requires-python = ">=3.10"
dependencies = []
keywords = ["tower defense", "game", "flow field", "pathfinding", "simulation"]
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
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["towerdef"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
