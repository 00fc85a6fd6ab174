[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "charabia"
version = "0.1.0"
description = "Script-aware text segmentation with configurable separators and word dictionaries"
requires-python = ">=3.10"
dependencies = []
keywords = ["tokenizer", "segmentation", "text", "unicode", "search", "camelcase", "kvariants"]
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
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["charabia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
