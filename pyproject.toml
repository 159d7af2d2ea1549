[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bindecimal"
version = "0.1.0"
description = "A 96-bit binary decimal type with rounding and conversion functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["decimal", "fixed-point", "rounding", "conversion", "float32"]
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
packages = ["bindecimal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
