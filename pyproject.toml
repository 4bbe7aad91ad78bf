[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hft_trading"
version = "0.1.0"
description = "Order-entry message decoding, a single-producer single-consumer queue and an order-queue linked list"
requires-python = ">=3.10"
dependencies = []
keywords = ["trading", "order entry", "binary protocol", "spsc", "queue", "order book"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hft-trading = "hft_trading.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hft_trading"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
