"""Tick-rule classification of trades as buyer- or seller-initiated."""

from __future__ import annotations

import argparse
import csv
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Iterator

from quantsims.vwap import Trade, load_trades


@dataclass(frozen=True)
class ClassifiedTrade:
    """A trade with its tick-rule label: unknown, buy, sell or same."""

    timestamp: int
    price: float
    size: int
    label: str


def classify_trades(trades: Iterable[Trade]) -> Iterator[ClassifiedTrade]:
    """Label each trade by comparing its price with the previous trade's."""
    prev_price: float | None = None
    for trade in trades:
        label = "unknown"
        if prev_price is not None and prev_price >= 0:
            if trade.price > prev_price:
                label = "buy"
            elif trade.price < prev_price:
                label = "sell"
            else:
                label = "same"
        prev_price = trade.price
        yield ClassifiedTrade(trade.timestamp, trade.price, trade.size, label)


def write_classified(classified: Iterable[ClassifiedTrade], path: str | PathLike) -> None:
    """Write classified trades to a CSV file with a header row."""
    with open(path, "w", encoding="utf-8", newline="") as fh:
        writer = csv.writer(fh, lineterminator="\n")
        writer.writerow(["timestamp", "price", "size", "label"])
        for c in classified:
            writer.writerow([c.timestamp, f"{c.price:g}", c.size, c.label])


def main(argv: list[str] | None = None) -> int:
    """Classify a trade file, print each trade and save the labels."""
    parser = argparse.ArgumentParser(description="Tick-rule trade classifier")
    parser.add_argument("path", nargs="?", default="../trades.csv")
    parser.add_argument("--output", default="classified_trades.csv")
    args = parser.parse_args(argv)

    classified = list(classify_trades(load_trades(args.path)))
    for c in classified:
        print(f"t={c.timestamp} | price={c.price:g} | size={c.size} | label={c.label}")
    write_classified(classified, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())