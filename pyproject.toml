[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursekit"
version = "0.1.0"
description = "Small utilities for scores, grades, passwords, file trees and a book catalogue"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "exercises", "grades", "scores", "passwords", "catalog"]
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
coursekit-library = "coursekit.library:main"

[tool.hatch.build.targets.wheel]
packages = ["coursekit"]

[tool.pytest.ini_options]
addopts = "-ra"
