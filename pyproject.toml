[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rhpsim"
version = "0.1.0"
description = "Building blocks for simulating data replication in highly partitioned mobile ad hoc networks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "manet",
    "ad-hoc",
    "replication",
    "simulation",
    "networking",
    "mobility",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rhpsim"]

[tool.hatch.build.targets.sdist]
include = ["rhpsim", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
