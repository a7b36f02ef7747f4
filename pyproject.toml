[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ourtrain"
version = "0.1.0"
description = "Train ticket history, offline queue, Java railway route map and Morse-tree password hashing"
requires-python = ">=3.10"
dependencies = []
keywords = ["train", "tickets", "railway", "routes", "history", "queue", "morse"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ourtrain = "ourtrain.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ourtrain"]

[tool.pytest.ini_options]
addopts = "-ra"
