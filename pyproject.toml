[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "gosections"
version = "0.12.1"
description = "Deterministic grouping and ordering of import blocks in Go source files"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["go", "golang", "imports", "formatter", "code-style"]
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
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.setuptools.packages.find]
include = ["gosections*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
