[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bevviewer"
version = "0.1.0"
description = "Bird's-eye-view viewer for per-frame radar detections and tracks read from CSV files"
requires-python = ">=3.10"
keywords = ["radar", "tracking", "bird's-eye view", "visualization", "csv", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bevviewer = "bevviewer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bevviewer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
