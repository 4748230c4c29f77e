[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "saba"
version = "0.1.0"
description = "A minimal HTTP/1.1 client with a simple URL and response parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "browser", "url", "client", "parser"]
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
    "Topic :: Internet :: WWW/HTTP :: Browsers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
saba = "saba.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["saba"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
