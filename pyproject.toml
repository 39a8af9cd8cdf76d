[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marelles"
version = "0.1.0"
description = "SVG figures of hopscotch lattices: logarithmic product grids, staircases, arctangent circles and orbits of the square map"
requires-python = ">=3.10"
dependencies = []
keywords = ["svg", "mathematics", "logarithm", "lattice", "visualization", "orbit"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
marelles-lattice = "marelles.lattice:main"
marelles-stairs = "marelles.stairs:main"
marelles-arctan = "marelles.arctan:main"
marelles-orbit = "marelles.orbit:main"

[tool.hatch.build.targets.wheel]
packages = ["marelles"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
