[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scrapkit"
version = "0.1.0"
description = "String, file and directory helpers plus growable string containers for web scraping tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["scraper", "strings", "split", "filesystem", "utilities"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scrapkit"]

[tool.pytest.ini_options]
addopts = "-ra"
