[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flightdesk"
version = "0.1.0"
description = "An in-memory flight catalogue with a console menu: add, list, filter, reprice and split flights."
requires-python = ">=3.10"
dependencies = []
keywords = ["flights", "airline", "catalogue", "console", "scheduling"]
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
flightdesk = "flightdesk.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["flightdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
