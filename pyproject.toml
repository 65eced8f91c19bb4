[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "neonshooter"
version = "0.1.0"
description = "Game logic of a vertical neon bullet-hell shooter: vectors, collision circles, bullet pools, items and enemy waves."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "shooter", "bullet-hell", "arcade", "simulation"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["neonshooter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
