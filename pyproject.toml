[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "haravc"
version = "0.1.0"
description = "Client library for verifiable-credential NFT, factory and storage contracts"
requires-python = ">=3.10"
dependencies = []
keywords = ["verifiable credentials", "did", "nft", "smart contracts", "blockchain"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["haravc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
