[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pplab"
version = "0.1.0"
description = "2048 solvers (Monte Carlo, Minimax, Expectimax), Monte Carlo pi estimation, Mandelbrot rendering and BMP image convolution"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "2048",
    "expectimax",
    "minimax",
    "monte-carlo",
    "pi",
    "mandelbrot",
    "convolution",
    "bmp",
    "ppm",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pplab-2048 = "pplab.cli:main"
pplab-pi = "pplab.pi:main"

[tool.hatch.build.targets.wheel]
packages = ["pplab"]

[tool.pytest.ini_options]
addopts = "-ra"
