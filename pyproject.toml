[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flocknoise"
version = "0.1.0"
description = "Noise synthesis driven by a simple flocking simulation: each bird steers a band-pass filter over white noise."
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "synthesis", "noise", "biquad", "flocking", "simulation", "wav"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
flocknoise = "flocknoise.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["flocknoise"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
