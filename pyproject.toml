[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "microkit"
version = "0.1.0"
description = "Command-line parsing and process running for a tiny shell, a minimal ls command and simple data structures"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "ls", "binary-tree", "linked-list", "hashtable"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
microls = "microkit.ls:main"

[tool.hatch.build.targets.wheel]
packages = ["microkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
