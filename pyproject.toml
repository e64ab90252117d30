[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicebox"
version = "0.1.0"
description = "Small terminal programs: an AVL tree, a craps dice game, minesweeper and a parts inventory"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "craps", "minesweeper", "inventory", "terminal", "games"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
practicebox-avl = "practicebox.avl:main"
practicebox-craps = "practicebox.craps:main"
practicebox-minesweeper = "practicebox.minesweeper:main"
practicebox-inventory = "practicebox.inventory:main"

[tool.hatch.build.targets.wheel]
packages = ["practicebox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
