[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sensorlink"
version = "0.1.0"
description = "In-process sensor telemetry service with unary, streaming and two-way calls, bearer-token checks and a bounded producer/consumer pipeline"
requires-python = ">=3.10"
dependencies = []
keywords = ["sensors", "telemetry", "monitoring", "streaming", "producer-consumer"]
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
    "Topic :: System :: Monitoring",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["sensorlink"]

[tool.hatch.build.targets.sdist]
include = ["sensorlink", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
