[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pave"
version = "0.1.0"
description = "Manage command links in a per-user bin directory and keep a JSON registry of them"
requires-python = ">=3.10"
dependencies = []
keywords = ["symlink", "cli", "path", "bin", "link"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Operating System :: MacOS",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pave = "pave.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pave"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
