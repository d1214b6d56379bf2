[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cnake"
version = "0.1.0"
description = "A classic grid-based snake arcade game built with pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["snake", "game", "arcade", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
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
cnake = "cnake.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cnake"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
