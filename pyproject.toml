[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stellar-invaders"
version = "0.1.0"
description = "Game logic for a vertical space shooter: movement strategies, enemy formations, collision detection, YAML levels and menus."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = [
    "game",
    "shooter",
    "arcade",
    "collision-detection",
    "quadtree",
    "bvh",
    "level-loader",
]
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
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["stellar_invaders"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
