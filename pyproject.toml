[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "statetypes"
version = "0.1.0"
description = "Shared state types for a blockchain actor runtime: signatures, exit codes, deadlines, proofs and network versions"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "actors", "cbor", "signatures", "exit codes", "proof of spacetime"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["statetypes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
