[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netwatch"
version = "0.1.0"
description = "Building blocks for a per-process network traffic monitor: hashing, sorting, formatting and packet capture setup"
requires-python = ">=3.10"
dependencies = []
keywords = ["network", "monitoring", "traffic", "process", "packet", "capture"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["netwatch"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
