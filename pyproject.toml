[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "problemas"
version = "0.1.0"
description = "Solutions to programming-contest problems: knapsack, name-pair counting and ligature queries"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "knapsack", "dynamic-programming", "bitset", "algorithms"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
problemas-knapsack = "problemas.knapsack:main"
problemas-nafnatalning = "problemas.nafnatalning:main"
problemas-ligatures = "problemas.ligatures:main"

[tool.hatch.build.targets.wheel]
packages = ["problemas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
