[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "c14calib"
version = "0.1.0"
description = "Calibrate radiocarbon (14C) dates against a calibration curve, with JSON or CSV output."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "radiocarbon",
    "14C",
    "calibration",
    "archaeology",
    "dating",
    "intcal",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
c14calib = "c14calib.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["c14calib"]

[tool.hatch.build.targets.sdist]
include = ["c14calib", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
