[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokecache"
version = "0.1.0"
description = "A small in-memory Pokemon cache served over HTTP as a WSGI application"
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "wsgi", "http", "pokemon", "fifo"]
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
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pokecache = "pokecache.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pokecache"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
