"""Aggregated order-book liquidity per price level, written out for heatmaps."""

from __future__ import annotations

import argparse
import csv
from dataclasses import dataclass, field
from os import PathLike


@dataclass
class LiquidityBook:
    """Total resting size per price on each side."""

    bids: dict[float, float] = field(default_factory=dict)
    asks: dict[float, float] = field(default_factory=dict)

    def load_csv(self, path: str | PathLike) -> None:
        """Add side,price,size rows to the book; sides other than bid and ask are ignored."""
        with open(path, encoding="utf-8", newline="") as fh:
            for lineno, raw in enumerate(fh, start=1):
                line = raw.rstrip("\r\n")
                if not line:
                    continue
                fields = line.split(",")
                if len(fields) < 3:
                    raise ValueError(f"line {lineno}: expected side, price and size")
                try:
                    price = float(fields[1])
                    size = float(fields[2])
                except ValueError as exc:
                    raise ValueError(f"line {lineno}: malformed row {line!r}") from exc
                side = fields[0]
                if side == "bid":
                    self.bids[price] = self.bids.get(price, 0.0) + size
                elif side == "ask":
                    self.asks[price] = self.asks.get(price, 0.0) + size


def write_heatmap(book: LiquidityBook, path: str | PathLike) -> None:
    """Write side,price,volume rows: bids then asks, each in ascending price order."""
    with open(path, "w", encoding="utf-8", newline="") as fh:
        writer = csv.writer(fh, lineterminator="\n")
        writer.writerow(["side", "price", "volume"])
        for side, levels in (("bid", book.bids), ("ask", book.asks)):
            for price, volume in sorted(levels.items()):
                writer.writerow([side, f"{price:g}", f"{volume:g}"])


def main(argv: list[str] | None = None) -> int:
    """Aggregate an order-book snapshot and write the heatmap data."""
    parser = argparse.ArgumentParser(description="Liquidity heatmap generator")
    parser.add_argument("path", nargs="?", default="orderbook.csv")
    parser.add_argument("--output", default="heatmap_output.csv")
    args = parser.parse_args(argv)

    book = LiquidityBook()
    book.load_csv(args.path)
    write_heatmap(book, args.output)
    print("Liquidity heatmap generated.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())