[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "falcosink"
version = "0.1.0"
description = "Alert outputs, logging, watchdog timers, stats files and a health endpoint for a runtime security engine"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "security",
    "runtime-security",
    "alerts",
    "logging",
    "monitoring",
    "health-check",
    "watchdog",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: System :: Logging",
    "Topic :: Security",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["falcosink"]

[tool.hatch.build.targets.sdist]
include = ["falcosink", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
