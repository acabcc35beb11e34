[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubgrid"
version = "0.1.0"
description = "A top-down grid map viewer with a movable player, the groundwork for a raycasting game"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "grid", "map", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubgrid = "cubgrid.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cubgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
