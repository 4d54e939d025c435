[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lucaria"
version = "0.1.0"
description = "Asset records, binary formats, asset fetching and scene helpers for a small game client"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "assets", "mesh", "texture", "ktx", "pvr", "cubemap", "scene"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lucaria"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
