[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "particlesim"
version = "1.0.0"
description = "Event-driven simulation of elastic particle collisions in the unit box"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "physics",
    "simulation",
    "collision",
    "event-driven",
    "priority-queue",
    "particles",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
particlesim = "particlesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["particlesim"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
