[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quantsims"
version = "0.1.0"
description = "Small market-microstructure and option-pricing simulators and analysers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "finance",
    "trading",
    "order book",
    "black-scholes",
    "heston",
    "vwap",
    "twap",
    "backtesting",
    "market making",
    "order flow imbalance",
    "simulation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quantsims-black-scholes = "quantsims.black_scholes:main"
quantsims-backtest = "quantsims.backtester:main"
quantsims-vwap = "quantsims.vwap:main"
quantsims-tick-rule = "quantsims.tick_rule:main"
quantsims-heston = "quantsims.heston:main"
quantsims-option-market = "quantsims.option_market:main"
quantsims-market-maker = "quantsims.market_maker:main"
quantsims-twap = "quantsims.twap:main"
quantsims-exchange = "quantsims.exchange:main"
quantsims-lob-replay = "quantsims.lob_replay:main"
quantsims-ofi = "quantsims.ofi:main"
quantsims-heatmap = "quantsims.heatmap:main"

[tool.hatch.build.targets.wheel]
packages = ["quantsims"]

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
