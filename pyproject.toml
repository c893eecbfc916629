[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solbridge"
version = "0.1.0"
description = "Small HTTP service for Solana keypairs, message signing and transfer instructions"
requires-python = ">=3.10"
keywords = ["solana", "ed25519", "keypair", "signing", "base58", "http", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "flask",
    "pynacl",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
solbridge = "solbridge.app:main"

[tool.hatch.build.targets.wheel]
packages = ["solbridge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
