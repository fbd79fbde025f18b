[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robosim"
version = "0.1.0"
description = "Kinematic models of robots and ground vehicles, one-step state propagation and simple controllers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["robotics", "kinematics", "bicycle model", "pure pursuit", "pid", "simulation"]
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

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["robosim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
