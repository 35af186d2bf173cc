[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terminfodb"
version = "0.1.0"
description = "Terminal capability database with parameter expansion, padding, infocmp loading and a raw-mode stdio tty"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminfo", "terminal", "tty", "ansi", "escape-sequences", "infocmp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["terminfodb"]

[tool.pytest.ini_options]
addopts = "-ra"
