[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "offt"
version = "0.1.0"
description = "Fast Fourier transform building blocks: Fourier conventions, number-theoretic helpers and fixed-size DFT kernels"
requires-python = ">=3.10"
dependencies = []
keywords = ["fft", "fourier", "dft", "number-theory", "primitive-root", "prime"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["offt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
