[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "closestpair"
version = "0.1.0"
description = "Closest pair of points by brute force and divide and conquer, with a timing benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["closest pair", "divide and conquer", "computational geometry", "benchmark", "quartiles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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
test = ["pytest", "hypothesis"]

[project.scripts]
closestpair-bench = "closestpair.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["closestpair"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
