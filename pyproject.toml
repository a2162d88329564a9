[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "notacao"
version = "0.1.0"
description = "Convert and evaluate arithmetic expressions in infix and postfix notation"
requires-python = ">=3.10"
dependencies = []
keywords = ["expression", "postfix", "infix", "rpn", "calculator", "shunting-yard"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
notacao = "notacao.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["notacao"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
