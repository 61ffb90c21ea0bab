"""Market-making bots quoting around a randomly walking mid price."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence, TextIO

_DEFAULT_RNG = random.Random()


class Side(Enum):
    """Side of a quote."""

    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class Quote:
    """A resting bid or ask."""

    price: float
    quantity: int
    side: Side
    timestamp: int


def timestamp() -> int:
    """Wall-clock time in nanoseconds since the epoch."""
    return time.time_ns()


def random_fill(rng: random.Random | None = None, prob: float = 0.5) -> bool:
    """Return True with probability ``prob``."""
    if not 0.0 <= prob <= 1.0:
        raise ValueError("probability must lie in [0, 1]")
    return (rng or _DEFAULT_RNG).random() < prob


def random_walk(rng: random.Random | None = None) -> float:
    """A normal price increment with standard deviation 0.5."""
    return (rng or _DEFAULT_RNG).gauss(0.0, 0.5)


@dataclass
class MarketMaker:
    """Bot that quotes a symmetric spread and tracks inventory and cash."""

    name: str
    spread: float = 1.0
    quote_size: int = 10
    inventory: int = 0
    cash: float = 0.0

    def generate_quotes(self, mid_price: float, timestamp: int) -> tuple[Quote, Quote]:
        """Return a bid and an ask half a spread either side of ``mid_price``."""
        half = self.spread / 2
        bid = Quote(mid_price - half, self.quote_size, Side.BUY, timestamp)
        ask = Quote(mid_price + half, self.quote_size, Side.SELL, timestamp)
        return bid, ask

    def handle_fill(self, order: Quote) -> None:
        """Update inventory and cash for a filled quote."""
        if order.side is Side.BUY:
            self.inventory += order.quantity
            self.cash -= order.price * order.quantity
        else:
            self.inventory -= order.quantity
            self.cash += order.price * order.quantity

    def pnl(self, mid_price: float) -> float:
        """Cash plus inventory marked at ``mid_price``."""
        return self.cash + self.inventory * mid_price


@dataclass
class MarketSimulator:
    """Runs bots against a random-walk mid price and reports their P&L."""

    bots: Sequence[MarketMaker]
    mid_price: float = 100.0
    rng: random.Random | None = field(default=None, repr=False)
    output: TextIO | None = field(default=None, repr=False)

    def run(self, steps: int) -> None:
        """Simulate ``steps`` rounds of quoting, random fills and price moves."""
        out = self.output or sys.stdout
        for t in range(steps):
            print(f"Time step {t} | Mid Price: ${self.mid_price:g}", file=out)
            for bot in self.bots:
                bid, ask = bot.generate_quotes(self.mid_price, timestamp())
                if random_fill(self.rng):
                    bot.handle_fill(bid)
                if random_fill(self.rng):
                    bot.handle_fill(ask)
                print(f"{bot.name} PnL: ${bot.pnl(self.mid_price):g}", file=out)
            self.mid_price += random_walk(self.rng)
            print("----------------------------", file=out)


def main(argv: list[str] | None = None) -> int:
    """Run two market-making bots and print their P&L at every step."""
    parser = argparse.ArgumentParser(description="Market maker simulation")
    parser.add_argument("--steps", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else None
    bots = [MarketMaker("MM_1"), MarketMaker("MM_2")]
    MarketSimulator(bots, rng=rng).run(args.steps)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())