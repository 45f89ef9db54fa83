[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lcdcalc"
version = "0.1.0"
description = "Expression evaluator for a small scientific calculator with a 16-character display"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "expression", "shunting-yard", "parser", "rpn"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lcdcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
