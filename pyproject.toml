[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genkingdom"
version = "0.1.0"
description = "Genetic Kingdom: a pygame game with a main menu, a tile map and an animated gold coin"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "tower-defence", "pygame", "tilemap", "sprite-animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
genkingdom = "genkingdom.app:main"

[tool.hatch.build.targets.wheel]
packages = ["genkingdom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
