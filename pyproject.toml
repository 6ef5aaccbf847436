[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockcodec"
version = "1.0.0"
description = "Block-based base32, base64 and hex encoding with strict padding and symbol checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["base32", "base64", "hex", "rfc4648", "encoding", "codec"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["blockcodec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
