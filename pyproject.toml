[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matugen"
version = "0.1.0"
description = "Material color scheme roles, colour-string filters and a template renderer for theming configuration files"
requires-python = ">=3.11"
dependencies = [
    "platformdirs",
]
keywords = [
    "material-you",
    "color-scheme",
    "theming",
    "templates",
    "colors",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["matugen"]

[tool.hatch.build.targets.sdist]
include = ["matugen", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
