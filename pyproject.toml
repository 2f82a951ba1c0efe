[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trigrun"
version = "0.1.0"
description = "Trigonometry Run: a side-scrolling arcade runner with a small 2D vector-graphics engine"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "runner", "side-scroller", "pygame", "vector-graphics"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
trigrun = "trigrun.game:main"

[tool.hatch.build.targets.wheel]
packages = ["trigrun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
