[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enginecommon"
version = "0.1.0"
description = "Shared game engine pieces: entity list, model list, CMSH/RMSH mesh and Oolite model loaders, path and text helpers, coloured logging."
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "entities", "mesh", "oolite", "models"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enginecommon"]

[tool.pytest.ini_options]
addopts = "-ra"
