[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qqwire"
version = "0.1.0"
description = "Binary wire primitives for the QQ mobile protocol: TEA cipher, byte readers and writers, compression helpers and JCE serialisation"
requires-python = ">=3.10"
dependencies = []
keywords = ["qq", "tea", "jce", "tars", "tlv", "binary", "protocol", "serialization"]
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
    "Topic :: Communications :: Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qqwire"]

[tool.pytest.ini_options]
addopts = "-ra"
