[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "saes"
version = "1.0.0"
description = "Simple AES Tool: command-line checks of input, key and output files for AES in ECB mode"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "ecb", "key", "cli"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
saes = "saes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["saes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
