[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdtracker"
version = "0.1.0"
description = "Track open file descriptors and close them together, in part or all at once"
requires-python = ">=3.10"
dependencies = []
keywords = ["file descriptor", "fd", "resource tracking", "cleanup", "leaks"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fdtracker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
