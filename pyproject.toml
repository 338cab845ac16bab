[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketarcade"
version = "0.1.0"
description = "Eight small arcade games for a 128x64 monochrome screen and four buttons"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "arcade",
    "games",
    "snake",
    "tetris",
    "2048",
    "breakout",
    "frogger",
    "pacman",
    "flappy",
    "helicopter",
    "monochrome",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pocketarcade"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
