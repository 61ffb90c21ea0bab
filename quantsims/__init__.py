"""Trading, option-pricing and market-microstructure simulators and analysers."""

__version__ = "0.1.0"