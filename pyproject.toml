[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bistromath"
version = "1.0.0"
description = "Arbitrary-precision integer calculator with configurable digit and operator characters"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "bignum", "arbitrary precision", "expression"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bistromath = "bistromath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bistromath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
