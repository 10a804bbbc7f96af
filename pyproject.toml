[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "easypap"
version = "0.1.0"
description = "Image-based computation kernels for teaching tiled computation, with CPU activity statistics and an execution trace model"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "parallel programming",
    "kernels",
    "tiling",
    "cellular automata",
    "sandpile",
    "mandelbrot",
    "image processing",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["easypap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
