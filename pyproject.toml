[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfdot"
version = "0.1.0"
description = "Flag checks, TLS settings and desired-LRP update handling for a Diego deployment command-line tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["diego", "bbs", "lrp", "tls", "cli", "cloud-foundry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cfdot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
