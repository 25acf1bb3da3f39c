[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "bankwire"
version = "0.1.0"
description = "Command-driven simulator of a bank's wire transfers, fees and account queries"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "wire transfer", "simulation", "fees", "transactions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bankwire = "bankwire.cli:main"

[tool.setuptools.packages.find]
include = ["bankwire*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
