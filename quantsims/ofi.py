"""Order-flow imbalance from top-of-book quote updates."""

from __future__ import annotations

import argparse
import csv
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Iterator


@dataclass(frozen=True)
class QuoteEvent:
    """A best-quote update on the bid or ask side."""

    timestamp: int
    type: str
    price: float
    size: int
    side: str


@dataclass
class TopOfBook:
    """Current best bid and ask with their sizes."""

    bid_price: float = 0.0
    ask_price: float = 0.0
    bid_size: int = 0
    ask_size: int = 0

    def apply(self, event: QuoteEvent) -> None:
        """Replace the quote on the event's side; other sides are ignored."""
        if event.side == "bid":
            self.bid_price = event.price
            self.bid_size = event.size
        elif event.side == "ask":
            self.ask_price = event.price
            self.ask_size = event.size

    def mid_price(self) -> float:
        """Midpoint of bid and ask, or 0.0 unless both are positive."""
        if self.bid_price > 0 and self.ask_price > 0:
            return 0.5 * (self.bid_price + self.ask_price)
        return 0.0


@dataclass(frozen=True)
class OfiRecord:
    """Order-flow imbalance and mid price after one event."""

    timestamp: int
    ofi: int
    mid_price: float


def load_events(path: str | PathLike) -> list[QuoteEvent]:
    """Read timestamp,type,price,size,side rows after the header line."""
    events: list[QuoteEvent] = []
    with open(path, encoding="utf-8", newline="") as fh:
        next(fh, None)
        for lineno, raw in enumerate(fh, start=2):
            fields = raw.rstrip("\r\n").split(",")
            if len(fields) < 5:
                raise ValueError(f"line {lineno}: expected five fields")
            try:
                events.append(
                    QuoteEvent(
                        int(fields[0]), fields[1], float(fields[2]), int(fields[3]), fields[4]
                    )
                )
            except ValueError as exc:
                raise ValueError(f"line {lineno}: malformed event {raw.strip()!r}") from exc
    return events


def compute_ofi(events: Iterable[QuoteEvent]) -> Iterator[OfiRecord]:
    """Yield the imbalance for each event; a changed price counts the full new size."""
    book = TopOfBook()
    for event in events:
        old_bid, old_ask = book.bid_price, book.ask_price
        old_bid_size, old_ask_size = book.bid_size, book.ask_size
        book.apply(event)

        d_bid = book.bid_size - old_bid_size if book.bid_price == old_bid else book.bid_size
        d_ask = book.ask_size - old_ask_size if book.ask_price == old_ask else book.ask_size
        yield OfiRecord(event.timestamp, d_bid - d_ask, book.mid_price())


def main(argv: list[str] | None = None) -> int:
    """Compute the OFI series of an event file, print it and save it as CSV."""
    parser = argparse.ArgumentParser(description="Order-flow imbalance analyzer")
    parser.add_argument("path", nargs="?", default="../ofi_events.csv")
    parser.add_argument("--output", default="ofi_output.csv")
    args = parser.parse_args(argv)

    events = load_events(args.path)
    with open(args.output, "w", encoding="utf-8", newline="") as fh:
        writer = csv.writer(fh, lineterminator="\n")
        writer.writerow(["timestamp", "OFI", "MidPrice"])
        for record in compute_ofi(events):
            print(f"t={record.timestamp} | OFI={record.ofi} | Mid={record.mid_price:.4f}")
            writer.writerow([record.timestamp, record.ofi, f"{record.mid_price:g}"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())