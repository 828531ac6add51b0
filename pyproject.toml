[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "btlecore"
version = "0.11.8"
description = "Core types and abstractions for Bluetooth Low Energy (BLE) GATT clients: addresses, UUIDs, peripherals, centrals and event broadcasting."
requires-python = ">=3.10"
dependencies = []
keywords = ["bluetooth", "ble", "gatt", "uuid", "asyncio"]
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
    "Framework :: AsyncIO",
    "Topic :: System :: Hardware",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["btlecore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
