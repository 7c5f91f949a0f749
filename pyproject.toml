[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smartdevices"
version = "0.1.0"
description = "A simulated smart socket and thermometer that report their readings over TCP to a text dashboard server"
requires-python = ">=3.10"
dependencies = []
keywords = ["smart home", "socket", "thermometer", "tcp", "dashboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[project.scripts]
smartdevices-server = "smartdevices.server:main"
smartdevices-client = "smartdevices.clients:main"

[tool.hatch.build.targets.wheel]
packages = ["smartdevices"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
