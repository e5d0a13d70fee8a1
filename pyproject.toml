[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stellargen"
version = "0.1.0"
description = "Seeded random generation of moons and stars' visuals, with weighted CSV catalogs, tags, transforms and 2D particles"
requires-python = ">=3.10"
keywords = [
    "procedural-generation",
    "space",
    "moons",
    "random",
    "weighted-choice",
    "particles",
    "game",
]
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
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["stellargen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
