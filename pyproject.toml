[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autopointing"
version = "1.0.0"
description = "Scripted touch works, settings storage and the serial wire protocol for a digitizer-driven touch automation tool"
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = ["automation", "digitizer", "serial", "touch", "pointing", "xml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: Terminals :: Serial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["autopointing"]

[tool.pytest.ini_options]
addopts = "-ra"
