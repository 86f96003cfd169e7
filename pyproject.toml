[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pursuit_controller"
version = "0.1.0"
description = "Pure pursuit path-following controller with lifecycle management, path generation and a differential-drive simulator"
requires-python = ">=3.10"
keywords = ["pure pursuit", "robotics", "path following", "differential drive", "controller"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pursuit_controller"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
