[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustrepl"
version = "1.9.0"
description = "Building blocks for an interactive Rust REPL: options, history, themes, line editing and command parsing"
requires-python = ">=3.10"
keywords = ["rust", "repl", "interpreter", "cargo", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]
dependencies = [
    "platformdirs",
    "toml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rustrepl = "rustrepl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rustrepl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
