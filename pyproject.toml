[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numinterp"
version = "0.1.0"
description = "Grammar-based recogniser for decimal numbers, exponents and the inf/nan constants"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "grammar", "number", "recogniser", "validation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
numinterp = "numinterp.interpreter:main"

[tool.hatch.build.targets.wheel]
packages = ["numinterp"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
