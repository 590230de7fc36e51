[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "curve25519ref"
version = "0.1.0"
description = "Pure-Python arithmetic for the Curve25519 field and the Edwards25519 group"
requires-python = ">=3.10"
dependencies = []
keywords = ["curve25519", "ed25519", "edwards", "elliptic-curve", "field-arithmetic", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["curve25519ref"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
