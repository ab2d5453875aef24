[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sitewordcount"
version = "0.1.0"
description = "Fetch web pages concurrently and count the words in their visible text"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "html", "word count", "concurrency"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sitewordcount = "sitewordcount.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sitewordcount"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
