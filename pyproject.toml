[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilecraft"
version = "0.0.1"
description = "Core systems for a 2D tile game: namespaced ids, data definitions, assets, cameras and draw layers, input actions and a fixed-step game loop."
requires-python = ">=3.10"
keywords = ["game", "tiles", "input", "assets", "game-loop", "camera"]
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
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tilecraft"]

[tool.pytest.ini_options]
addopts = "-ra"
