[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mercadofinger"
version = "0.1.0"
description = "Clients, branches, shopping carts and product promotions for a small store, with a line-oriented command interpreter"
requires-python = ">=3.10"
dependencies = []
keywords = ["store", "promotions", "clients", "binary-search-tree", "command-interpreter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mercadofinger = "mercadofinger.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mercadofinger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
