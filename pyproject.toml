[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hpcover"
version = "0.1.0"
description = "Heat pump cover generator: parts library matching, dimension checks and collision detection"
requires-python = ">=3.10"
dependencies = []
keywords = ["heat pump", "cover", "enclosure", "generator", "dimensions", "configurator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hpcover"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
