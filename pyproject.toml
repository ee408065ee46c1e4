[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gbdcheck"
version = "0.1.0"
description = "Growable vector container and the catalogue of display-list validation diagnostics"
requires-python = ">=3.10"
dependencies = []
keywords = ["n64", "display list", "rdp", "diagnostics", "debugging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gbdcheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
