[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geokdtree"
version = "0.1.0"
description = "KD-tree spatial index for great-circle radius searches over points on a sphere"
requires-python = ">=3.10"
keywords = ["kd-tree", "geospatial", "haversine", "spatial-index", "sphere"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
geokdtree-benchmark = "geokdtree.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["geokdtree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
