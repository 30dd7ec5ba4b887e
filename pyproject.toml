[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kernelbench"
version = "0.1.0"
description = "Small reference kernels and simulated bare-metal test programs: radix sort, Towers of Hanoi, vector add, CRC-32, Fibonacci, ROT13 and per-hart timer traps."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "benchmark",
    "radix-sort",
    "towers-of-hanoi",
    "vector-add",
    "crc32",
    "rot13",
    "timer-interrupt",
    "risc-v",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["kernelbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
