[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "turtlekit"
version = "0.1.0"
description = "Turtle graphics to SVG with a small command language, plus teaching list structures and helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["turtle", "svg", "education", "linked list", "bubble sort"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
turtlekit = "turtlekit.interpreter:main"

[tool.hatch.build.targets.wheel]
packages = ["turtlekit"]

[tool.pytest.ini_options]
addopts = "-ra"
