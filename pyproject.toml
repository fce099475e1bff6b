[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "limagetools"
version = "0.1.0"
description = "In-memory image processing on bitmap, grey-level and colour images: histograms, Otsu thresholding, look-up tables and binary erosion"
requires-python = ">=3.10"
dependencies = []
keywords = ["image processing", "histogram", "otsu", "erosion", "morphology", "lut", "thresholding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["limagetools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
