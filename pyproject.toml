[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "invaders"
version = "0.1.0"
description = "A small fixed-shooter arcade game: a ship at the bottom, a formation of swaying enemies above."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "shooter", "pygame"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
invaders = "invaders.game:main"

[tool.hatch.build.targets.wheel]
packages = ["invaders"]

[tool.pytest.ini_options]
addopts = "-ra"
