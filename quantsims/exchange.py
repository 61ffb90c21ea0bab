"""Continuous double-auction exchange with price-time priority matching."""

from __future__ import annotations

import argparse
import heapq
import itertools
import random
from dataclasses import dataclass, field, replace
from enum import Enum

_DEFAULT_RNG = random.Random()


class OrderType(Enum):
    """Direction of an order."""

    BUY = "buy"
    SELL = "sell"


@dataclass
class Order:
    """A limit order submitted by a trader."""

    id: int
    trader_id: str
    type: OrderType
    price: float
    quantity: int
    timestamp: int


@dataclass(frozen=True)
class Trade:
    """A match between a buy order and a sell order."""

    buy_order_id: int
    sell_order_id: int
    price: float
    quantity: int
    timestamp: int


class OrderBook:
    """Limit order book matching by best price, then earliest timestamp."""

    def __init__(self) -> None:
        self._bids: list[tuple[float, int, int, Order]] = []
        self._asks: list[tuple[float, int, int, Order]] = []
        self._seq = itertools.count()
        self.trades: list[Trade] = []

    def _rest(self, order: Order) -> None:
        if order.type is OrderType.BUY:
            heapq.heappush(self._bids, (-order.price, order.timestamp, next(self._seq), order))
        else:
            heapq.heappush(self._asks, (order.price, order.timestamp, next(self._seq), order))

    def submit(self, order: Order) -> list[Trade]:
        """Match ``order`` against the opposite side, rest any remainder, and return the new trades."""
        order = replace(order)
        incoming_buy = order.type is OrderType.BUY
        opposite = self._asks if incoming_buy else self._bids
        new_trades: list[Trade] = []

        while opposite and order.quantity > 0:
            entry = opposite[0]
            resting = entry[-1]
            if incoming_buy and order.price < resting.price:
                break
            if not incoming_buy and order.price > resting.price:
                break
            heapq.heappop(opposite)

            qty = min(order.quantity, resting.quantity)
            if incoming_buy:
                trade = Trade(order.id, resting.id, resting.price, qty, order.timestamp)
            else:
                trade = Trade(resting.id, order.id, resting.price, qty, order.timestamp)
            new_trades.append(trade)

            if resting.quantity > qty:
                resting.quantity -= qty
                heapq.heappush(opposite, entry)
            order.quantity -= qty

        if order.quantity > 0:
            self._rest(order)

        self.trades.extend(new_trades)
        return new_trades


@dataclass
class Trader:
    """A participant sending random limit orders."""

    trader_id: str
    capital: int = 10000
    holdings: int = 0
    rng: random.Random | None = field(default=None, repr=False, compare=False)

    def random_order(self, order_id: int, timestamp: int) -> Order:
        """Random side, a whole price from 95 to 105 and a size of 10 to 50 in steps of 10."""
        rng = self.rng or _DEFAULT_RNG
        order_type = OrderType.BUY if rng.randrange(2) == 0 else OrderType.SELL
        price = float(95 + rng.randrange(11))
        qty = (rng.randrange(5) + 1) * 10
        return Order(order_id, self.trader_id, order_type, price, qty, timestamp)


@dataclass
class Exchange:
    """Runs rounds in which every trader submits one random order."""

    order_book: OrderBook = field(default_factory=OrderBook)
    traders: list[Trader] = field(default_factory=list)
    next_order_id: int = 1

    def add_trader(self, trader: Trader) -> None:
        """Register a trader."""
        self.traders.append(trader)

    def simulate(self, rounds: int) -> list[Trade]:
        """Run ``rounds`` rounds and return every trade executed on the book so far."""
        for round_no in range(rounds):
            for trader in self.traders:
                order = trader.random_order(self.next_order_id, round_no)
                self.next_order_id += 1
                self.order_book.submit(order)
        return list(self.order_book.trades)


def format_trade(trade: Trade) -> str:
    """One-line description of a trade."""
    return (
        f"BUY#{trade.buy_order_id} <--> SELL#{trade.sell_order_id}"
        f" | Qty: {trade.quantity} @ ${trade.price:g}"
    )


def main(argv: list[str] | None = None) -> int:
    """Simulate three random traders and print the executed trades."""
    parser = argparse.ArgumentParser(description="Exchange simulator")
    parser.add_argument("--rounds", type=int, default=50)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else None
    exchange = Exchange()
    for name in ("T1", "T2", "MarketMaker"):
        exchange.add_trader(Trader(name, rng=rng))

    trades = exchange.simulate(args.rounds)
    print("=== Executed Trades ===")
    for trade in trades:
        print(format_trade(trade))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())