[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keycalc"
version = "0.1.0"
description = "A keypad-driven pocket calculator with a formula line and memory, usable from the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "keypad", "arithmetic", "memory", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
keycalc = "keycalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["keycalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
