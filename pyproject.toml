[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sfmlplay"
version = "0.1.0"
description = "2D game pieces and toy physics: bouncing balls, collisions, orbits, tile maps, pong and a playable snake game"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "snake", "pong", "physics", "simulation", "tilemap", "2d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sfmlplay-snake = "sfmlplay.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sfmlplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
