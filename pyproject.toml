[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reflexgames"
version = "0.1.0"
description = "Two-player reaction, countdown and grid-exploration games with their timing and decoding logic"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "reaction-time", "countdown", "infrared", "nec", "grid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
reflexgames = "reflexgames.app:main"

[tool.hatch.build.targets.wheel]
packages = ["reflexgames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
