[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sigcore"
version = "0.1.0"
description = "Pure-Python RIPEMD-160, SHA-256, SHA-512 and Ed25519 signatures with key recovery"
requires-python = ">=3.10"
dependencies = []
keywords = ["ed25519", "signature", "sha256", "sha512", "ripemd160", "hash", "curve25519"]
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
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["sigcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
