[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uintcodec"
version = "0.1.0"
description = "Fixed-width unsigned integer helpers and codecs: limbs, bytes, RLP, hex and SCALE."
requires-python = ">=3.10"
dependencies = []
keywords = ["uint", "bigint", "rlp", "scale", "codec", "serialization", "limbs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["uintcodec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
