[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bwtest"
version = "2.0.8"
description = "Building blocks for network bandwidth measurement: unit parsing and formatting, timestamps, latency statistics, socket options and wire headers"
requires-python = ">=3.10"
dependencies = []
keywords = ["bandwidth", "throughput", "network", "benchmark", "tcp", "udp"]
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
    "Topic :: System :: Benchmark",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bwtest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
