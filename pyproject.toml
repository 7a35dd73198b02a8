[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "budgetrack"
version = "0.1.0"
description = "Interactive terminal budget tracker for income and expense records"
requires-python = ">=3.10"
dependencies = []
keywords = ["budget", "finance", "expenses", "income", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
budgetrack = "budgetrack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["budgetrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
