[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "voxelcraft"
version = "0.1.0"
description = "Core pieces of a block-based voxel world: Perlin noise, chunk storage, region files, ore veins, particles, raycasting and player physics."
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "perlin", "noise", "raycast", "chunk", "game", "simulation"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["voxelcraft*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
