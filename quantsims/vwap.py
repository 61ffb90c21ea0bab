"""Volume-weighted average price of a trade file."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from os import PathLike
from typing import Iterable


@dataclass(frozen=True)
class Trade:
    """A single trade print."""

    timestamp: int
    price: float
    size: int


def load_trades(path: str | PathLike) -> list[Trade]:
    """Read timestamp,price,size rows from a CSV file, skipping the header."""
    trades: list[Trade] = []
    with open(path, encoding="utf-8", newline="") as fh:
        next(fh, None)
        for lineno, line in enumerate(fh, start=2):
            fields = line.rstrip("\r\n").split(",")
            if len(fields) < 3:
                raise ValueError(f"line {lineno}: expected timestamp, price and size")
            try:
                trades.append(Trade(int(fields[0]), float(fields[1]), int(fields[2])))
            except ValueError as exc:
                raise ValueError(f"line {lineno}: malformed trade {line.strip()!r}") from exc
    return trades


def calculate_vwap(trades: Iterable[Trade]) -> float:
    """Return the volume-weighted average price, or 0.0 when there is no volume."""
    total_volume = 0.0
    total_value = 0.0
    for trade in trades:
        total_volume += trade.size
        total_value += trade.price * trade.size
    return 0.0 if total_volume == 0 else total_value / total_volume


def main(argv: list[str] | None = None) -> int:
    """Print the VWAP of a trade file."""
    parser = argparse.ArgumentParser(description="VWAP calculator")
    parser.add_argument("path", nargs="?", default="trades.csv")
    args = parser.parse_args(argv)

    print(f"VWAP: {calculate_vwap(load_trades(args.path)):g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())