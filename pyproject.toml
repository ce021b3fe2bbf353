[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftssl"
version = "0.1.0"
description = "Message digest tool with pure-Python MD5, SHA-224, SHA-256, SHA-384 and SHA-512"
requires-python = ">=3.10"
dependencies = []
keywords = ["md5", "sha256", "sha224", "sha512", "sha384", "digest", "hash"]
classifiers = [
    "Development Status :: 4 - Beta",
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
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
ftssl = "ftssl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ftssl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
