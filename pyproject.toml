[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vecmat"
version = "0.1.0"
description = "Small fixed-size vectors and square matrices for geometry and games"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "linear algebra", "geometry", "cross product"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vecmat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
