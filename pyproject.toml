[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "connectorlink"
version = "0.1.0"
description = "Local inter-application connection primitives: UUIDs, string helpers, messages, announcement directories and loopback TCP auto-connection."
requires-python = ">=3.10"
dependencies = []
keywords = ["ipc", "messaging", "sockets", "uuid", "connector", "loopback"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["connectorlink"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
