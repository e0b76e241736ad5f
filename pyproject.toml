[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dcmkit"
version = "0.1.0"
description = "DICOM data elements, datasets, date/time values, character sets and binary I/O"
requires-python = ">=3.10"
dependencies = []
keywords = ["dicom", "medical-imaging", "datetime", "parsing", "binary"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Healthcare Industry",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dcmkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
