[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flightdb"
version = "0.1.0"
description = "In-memory stores and ranking queries for aircraft, airline, airport, flight, nationality, passenger and reservation records"
requires-python = ">=3.10"
dependencies = []
keywords = ["flights", "airports", "airlines", "passengers", "reservations", "in-memory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["flightdb"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
