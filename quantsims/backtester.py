"""Moving-average crossover backtest over daily closing prices."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from os import PathLike


@dataclass(frozen=True)
class PriceData:
    """One dated closing price."""

    date: str
    close: float


@dataclass(frozen=True)
class Trade:
    """A buy or sell executed by the backtest."""

    date: str
    action: str
    price: float


@dataclass
class BacktestResult:
    """Final portfolio value and the trades that led to it."""

    final_value: float
    trades: list[Trade] = field(default_factory=list)


def load_price_data(path: str | PathLike) -> list[PriceData]:
    """Read a CSV of date,close rows, skipping the header line."""
    data: list[PriceData] = []
    with open(path, encoding="utf-8", newline="") as fh:
        next(fh, None)
        for lineno, line in enumerate(fh, start=2):
            fields = line.rstrip("\r\n").split(",")
            if len(fields) < 2:
                raise ValueError(f"line {lineno}: expected date and close fields")
            try:
                close = float(fields[1])
            except ValueError as exc:
                raise ValueError(f"line {lineno}: invalid close price {fields[1]!r}") from exc
            data.append(PriceData(fields[0], close))
    return data


def moving_average(data: list[PriceData], end: int, window: int) -> float | None:
    """Mean close of the `window` prices ending at index `end`, or None if unavailable."""
    if window < 1:
        raise ValueError("window must be at least 1")
    if end < window - 1 or end >= len(data):
        return None
    return sum(p.close for p in data[end - window + 1 : end + 1]) / window


def run_backtest(
    prices: list[PriceData],
    cash: float = 10000.0,
    short_window: int = 5,
    long_window: int = 20,
) -> BacktestResult:
    """Go all in when the short average crosses above the long one, exit on the reverse."""
    if not prices:
        raise ValueError("no price data")

    trades: list[Trade] = []
    position = 0.0

    for i, p in enumerate(prices):
        short_ma = moving_average(prices, i, short_window)
        long_ma = moving_average(prices, i, long_window)
        if short_ma is None or long_ma is None:
            continue

        if short_ma > long_ma and position == 0:
            position = cash / p.close
            cash = 0.0
            trades.append(Trade(p.date, "BUY", p.close))
        elif short_ma < long_ma and position > 0:
            cash = position * p.close
            trades.append(Trade(p.date, "SELL", p.close))
            position = 0.0

    final_value = cash + position * prices[-1].close
    return BacktestResult(final_value, trades)


def main(argv: list[str] | None = None) -> int:
    """Run the crossover backtest on a price file and print the result."""
    parser = argparse.ArgumentParser(description="Moving-average crossover backtester")
    parser.add_argument("path", nargs="?", default="data/prices.csv")
    args = parser.parse_args(argv)

    result = run_backtest(load_price_data(args.path))
    print(f"Final Portfolio Value: ${result.final_value:g}")
    for trade in result.trades:
        print(f"{trade.date} - {trade.action} @ {trade.price:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())