[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clexer"
version = "0.1.0"
description = "A small lexer that splits C source files into a stream of token types"
requires-python = ">=3.10"
dependencies = []
keywords = ["c", "lexer", "tokenizer", "compiler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clexer = "clexer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clexer"]

[tool.pytest.ini_options]
addopts = "-ra"
