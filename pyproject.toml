[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ox"
version = "1.5.3"
description = "A plugin-driven command line tool for building and generating web applications"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "plugins", "code-generation", "scaffolding", "generators"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ox = "ox.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
