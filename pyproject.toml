[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kconfkit"
version = "0.1.0"
description = "Kconfig-style configuration toolkit: symbol model, expression evaluation, simplification and printing, .config and header formatting, and text-dialog layout helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["kconfig", "configuration", "build", "expressions", "autoconf"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kconfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
