[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "almacen"
version = "0.1.0"
description = "Interactive terminal manager for a small product and warehouse inventory"
requires-python = ">=3.10"
keywords = ["inventory", "warehouse", "products", "terminal", "stock"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
almacen = "almacen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["almacen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
