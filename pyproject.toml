[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carsim"
version = "1.0.0"
description = "Publish/subscribe simulator for video links and GPS car tracks"
requires-python = ">=3.10"
dependencies = []
keywords = ["publish-subscribe", "broker", "gps", "simulation", "video"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
carsim = "carsim.simulator:main"

[tool.hatch.build.targets.wheel]
packages = ["carsim"]

[tool.pytest.ini_options]
addopts = "-ra"
