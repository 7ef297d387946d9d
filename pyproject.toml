[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickout"
version = "0.1.0"
description = "Engine pieces for a brick-breaking arcade game: colours, geometry, surfaces, WAVE sounds, high scores and interface widgets"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "breakout", "sprites", "wav", "mixer", "widgets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["brickout"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
