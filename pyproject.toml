[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sbdb"
version = "0.1.0"
description = "Build queries for the Small-Body Database Query API, send them, and decode the JSON responses into typed records."
requires-python = ">=3.10"
dependencies = []
keywords = ["sbdb", "asteroids", "comets", "small bodies", "orbits", "astronomy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sbdb"]

[tool.pytest.ini_options]
addopts = "-ra"
