[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sigcarve"
version = "0.3.0"
description = "Format validators for signature-based file carving: confirm a candidate hit and measure the file's length."
requires-python = ">=3.10"
dependencies = []
keywords = ["carving", "data-recovery", "forensics", "file-signatures", "validators"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Recovery Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sigcarve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
