[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "myocardium"
version = "0.1.0"
description = "Holzapfel-Ogden uncoupled hyperelastic myocardium material: stress, tangent and strain energy"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "biomechanics",
    "hyperelasticity",
    "myocardium",
    "finite-elements",
    "holzapfel-ogden",
    "constitutive-model",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
]

[tool.hatch.build.targets.wheel]
packages = ["myocardium"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
