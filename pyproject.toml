[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tickplanner"
version = "0.1.0"
description = "Plan tick-by-tick player action sequences on a tile grid"
requires-python = ">=3.10"
keywords = ["tick", "planner", "sequence", "game", "tile", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tickplanner = "tickplanner.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tickplanner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
