[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weilang"
version = "0.1.0"
description = "Tokens, runtime values, scopes, modules and classes for the wei scripting language"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "scripting-language", "object-model", "tokens", "runtime"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["weilang"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
