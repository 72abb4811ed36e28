[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rstfast"
version = "0.1.0"
description = "Dependency-free building blocks for rendering reStructuredText markup as HTML"
requires-python = ">=3.10"
dependencies = []
keywords = ["rst", "restructuredtext", "html", "markup", "tables"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Markup",
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Text Processing :: Markup :: reStructuredText",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rstfast"]

[tool.pytest.ini_options]
addopts = "-ra"
