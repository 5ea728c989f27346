[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tmxload"
version = "1.0.0"
description = "Load Tiled TMX maps: tilesets, tile layers, object groups and their properties"
requires-python = ">=3.10"
dependencies = []
keywords = ["tiled", "tmx", "tilemap", "gamedev", "loader"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tmxload"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
