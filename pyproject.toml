[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sckit"
version = "2.0.0"
description = "Small building blocks: dynamic array, binary heap, serialization buffer, CRC-32C, INI parser, condition handoff and doubly linked list"
requires-python = ">=3.10"
dependencies = []
keywords = ["array", "heap", "buffer", "serialization", "crc32c", "ini", "linked-list", "condition"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sckit"]

[tool.pytest.ini_options]
addopts = "-ra"
