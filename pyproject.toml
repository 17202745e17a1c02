[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algosandbox"
version = "0.1.0"
description = "Small data structures (BST, linked list, m-ary tree) and Linux namespace and networking helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "binary search tree",
    "linked list",
    "data structures",
    "namespaces",
    "iproute2",
    "linux",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
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

[project.scripts]
algosandbox-memory-eater = "algosandbox.memory_eater:main"

[tool.hatch.build.targets.wheel]
packages = ["algosandbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
