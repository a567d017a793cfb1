[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arenastats"
version = "0.1.0"
description = "Statistics for arena match histories exported as semicolon-separated CSV"
requires-python = ">=3.10"
dependencies = []
keywords = ["arena", "pvp", "statistics", "csv", "games"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
arenastats = "arenastats.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arenastats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
