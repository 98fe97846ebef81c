[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "safezone"
version = "0.1.0"
description = "Core logic for a safety monitoring service: violation records, notifications, logging and detection post-processing"
requires-python = ">=3.10"
keywords = ["surveillance", "safety", "facemask", "notifications", "object-detection", "cbor"]
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
    "Topic :: Security",
]
dependencies = [
    "cbor2",
    "numpy",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["safezone"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
