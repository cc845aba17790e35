[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nyw"
version = "0.1.0"
description = "Declarative system setup: install packages, write dotfiles and run scripts from JSONC configuration"
requires-python = ">=3.10"
dependencies = []
keywords = ["package-manager", "dotfiles", "declarative", "provisioning", "pacman", "apt", "jsonc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nyw = "nyw.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nyw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
