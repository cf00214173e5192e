[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pmtool"
version = "0.1.0"
description = "A small terminal project tracker for epics and stories, stored in a JSON file"
requires-python = ">=3.10"
dependencies = []
keywords = ["project-management", "epics", "stories", "tracker", "cli", "terminal"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pmtool = "pmtool.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pmtool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
