[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minihttp"
version = "0.1.0"
description = "A tiny threaded HTTP/1.x server with a path-parameter router"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "router", "web", "minimal"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minihttp-example = "minihttp.example:main"

[tool.hatch.build.targets.wheel]
packages = ["minihttp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
