[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bno055"
version = "0.1.0"
description = "Register-level driver for the BNO055 absolute orientation sensor over a pluggable bus"
requires-python = ">=3.10"
dependencies = []
keywords = ["bno055", "imu", "i2c", "sensor", "orientation", "quaternion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Instrument Drivers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bno055"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
