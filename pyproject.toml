[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "op-rpc-types"
version = "0.18.14"
description = "OP Stack RPC types: genesis chain info, receipt and transaction fields, and supervisor error codes."
requires-python = ">=3.10"
dependencies = []
keywords = ["optimism", "op-stack", "ethereum", "rpc", "json-rpc", "genesis", "receipt"]
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
packages = ["op_rpc_types"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
