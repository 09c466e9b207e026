[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flocksim"
version = "0.1.0"
description = "A 3D boids flocking simulation with scout groups, a fly-through camera and instancing transforms"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["boids", "flocking", "simulation", "artificial life", "swarm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
flocksim = "flocksim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["flocksim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
