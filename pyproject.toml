[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qcircsim"
version = "0.1.0"
description = "Apply a quantum circuit described in plain-text files to an initial state vector using dense complex matrices"
requires-python = ">=3.10"
dependencies = []
keywords = ["quantum", "circuit", "simulator", "qubit", "matrix", "state vector"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qcircsim = "qcircsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["qcircsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
