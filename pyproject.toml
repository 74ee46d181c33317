[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuzzycomplete"
version = "0.1.0"
description = "Typo-tolerant prefix autocompletion using a trie and an edit-vector automaton"
requires-python = ">=3.10"
dependencies = []
keywords = ["autocomplete", "fuzzy", "trie", "edit distance", "automaton"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fuzzycomplete = "fuzzycomplete.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fuzzycomplete"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
