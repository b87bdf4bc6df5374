[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wayfarer"
version = "0.1.0"
description = "Character-sheet logic for a tabletop role-playing companion: inventory, wealth, vitals, levels, journals and interface state."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "tabletop", "character-sheet", "inventory", "role-playing"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wayfarer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
