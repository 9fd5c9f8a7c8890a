[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lorawan-region"
version = "0.1.0"
description = "LoRaWAN regional channel plans: channel selection, data rates and receive window parameters"
requires-python = ">=3.10"
dependencies = []
keywords = ["lorawan", "lora", "iot", "radio", "channel-plan", "us915", "eu868"]
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
    "Topic :: Communications",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lorawan_region"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
