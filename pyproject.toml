[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scalargrad"
version = "0.1.0"
description = "A tiny scalar reverse-mode automatic differentiation engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["autograd", "backpropagation", "automatic differentiation", "tensor", "gradient"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scalargrad = "scalargrad.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["scalargrad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
