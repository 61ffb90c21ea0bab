"""Replay of limit-order-book events from a CSV file."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field, replace
from os import PathLike


@dataclass(frozen=True)
class Event:
    """One book event: add, modify, cancel or execute."""

    timestamp: int
    type: str
    order_id: int
    side: str
    price: float
    quantity: int


@dataclass
class Order:
    """A resting order; side is "buy" or anything else for the ask side."""

    order_id: int
    side: str
    price: float
    quantity: int


@dataclass
class BookSide:
    """Bids and asks keyed by price level, then by order id.

    Price levels stay in the book once created, even after their last order leaves.
    """

    bids: dict[float, dict[int, Order]] = field(default_factory=dict)
    asks: dict[float, dict[int, Order]] = field(default_factory=dict)

    def _levels(self, side: str) -> dict[float, dict[int, Order]]:
        return self.bids if side == "buy" else self.asks

    def _prices_best_first(self, side: str) -> list[float]:
        return sorted(self._levels(side), reverse=side == "buy")

    def add(self, order: Order) -> None:
        """Insert or replace an order at its price level."""
        self._levels(order.side).setdefault(order.price, {})[order.order_id] = replace(order)

    def modify(self, order: Order) -> None:
        """Replace an order, possibly at a new price."""
        self.cancel(order.order_id, order.side)
        self.add(order)

    def cancel(self, order_id: int, side: str) -> None:
        """Remove an order from the first level holding it."""
        levels = self._levels(side)
        for price in self._prices_best_first(side):
            if levels[price].pop(order_id, None) is not None:
                break

    def execute(self, order_id: int, side: str, quantity: int) -> None:
        """Reduce an order by ``quantity``, removing it once nothing is left."""
        levels = self._levels(side)
        for price in self._prices_best_first(side):
            orders = levels[price]
            order = orders.get(order_id)
            if order is not None:
                order.quantity -= quantity
                if order.quantity <= 0:
                    del orders[order_id]
                break

    def best_price(self, side: str) -> float:
        """Highest bid or lowest ask level, or 0.0 when the side is empty."""
        prices = self._prices_best_first(side)
        return prices[0] if prices else 0.0

    def total_volume_at_best(self, side: str) -> int:
        """Sum of quantities at the best level of ``side``."""
        prices = self._prices_best_first(side)
        if not prices:
            return 0
        return sum(o.quantity for o in self._levels(side)[prices[0]].values())


@dataclass
class LOB:
    """Order book driven by replayed events."""

    book: BookSide = field(default_factory=BookSide)

    def apply(self, event: Event) -> None:
        """Apply one event; unknown event types are ignored."""
        order = Order(event.order_id, event.side, event.price, event.quantity)
        if event.type == "add":
            self.book.add(order)
        elif event.type == "modify":
            self.book.modify(order)
        elif event.type == "cancel":
            self.book.cancel(event.order_id, event.side)
        elif event.type == "execute":
            self.book.execute(event.order_id, event.side, event.quantity)

    def top_of_book(self) -> tuple[float, int, float, int]:
        """Best bid, its volume, best ask, its volume."""
        return (
            self.book.best_price("buy"),
            self.book.total_volume_at_best("buy"),
            self.book.best_price("sell"),
            self.book.total_volume_at_best("sell"),
        )


def _parse_event(line: str) -> Event:
    fields = line.split(",")
    if len(fields) < 6:
        raise ValueError("too few fields")
    return Event(
        int(fields[0]),
        fields[1],
        int(fields[2]),
        fields[3],
        float(fields[4]),
        int(fields[5]),
    )


def load_events(path: str | PathLike) -> list[Event]:
    """Read events after the header line; blank lines are skipped, malformed ones reported and skipped."""
    events: list[Event] = []
    with open(path, encoding="utf-8", newline="") as fh:
        next(fh, None)
        for raw in fh:
            line = raw.rstrip("\r\n")
            if not line:
                continue
            try:
                events.append(_parse_event(line))
            except ValueError:
                print(f"Warning: Malformed line skipped: {line}", file=sys.stderr)
    return events


def main(argv: list[str] | None = None) -> int:
    """Replay an event file, printing the top of book after each event."""
    parser = argparse.ArgumentParser(description="Limit order book replay")
    parser.add_argument("path", nargs="?", default="../events.csv")
    args = parser.parse_args(argv)

    try:
        events = load_events(args.path)
    except OSError as exc:
        print(f"ERROR: Could not open file {args.path}: {exc}", file=sys.stderr)
        return 1

    print(f"Loaded {len(events)} events.")
    lob = LOB()
    for event in events:
        lob.apply(event)
        bid, bid_vol, ask, ask_vol = lob.top_of_book()
        print(f"Best Bid: {bid:g} ({bid_vol})  |  Best Ask: {ask:g} ({ask_vol})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())