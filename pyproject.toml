[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "namegen"
version = "1.0.0"
description = "Interactive multi-style name generator for Chinese, English and Japanese names"
requires-python = ">=3.10"
dependencies = []
keywords = ["names", "generator", "random", "chinese", "japanese", "english", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
namegen = "namegen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["namegen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
