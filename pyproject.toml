[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rlwe"
version = "0.1.0"
description = "Building blocks for Ring-LWE encryption: bit utilities, error bounds, bit transcription and seedable secure PRNGs."
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["rlwe", "lattice", "homomorphic", "prng", "chacha20", "hkdf"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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
]

[tool.hatch.build.targets.wheel]
packages = ["rlwe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
