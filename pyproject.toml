[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lanrelay"
version = "0.3.0"
description = "Input events, scancode translation, modifier tracking and input emulation bookkeeping for sharing a mouse and keyboard over a network"
requires-python = ">=3.10"
dependencies = []
keywords = ["input", "keyboard", "mouse", "scancode", "evdev", "emulation", "kvm"]
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
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["lanrelay"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
