[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gormgen"
version = "0.1.0"
description = "Building blocks for generating typed data-access code: SQL clause helpers, model field options, import lists and a file-writing generator core."
requires-python = ">=3.10"
dependencies = []
keywords = ["code generation", "orm", "sql", "dao", "codegen"]
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
    "Topic :: Software Development :: Code Generators",
    "Topic :: Database",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gormgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
