import random

import pytest

from quantsims.exchange import (
    Exchange,
    Order,
    OrderBook,
    OrderType,
    Trade,
    Trader,
    format_trade,
    main,
)


def _buy(oid, price, qty, ts=0):
    return Order(oid, "A", OrderType.BUY, price, qty, ts)


def _sell(oid, price, qty, ts=0):
    return Order(oid, "B", OrderType.SELL, price, qty, ts)


def test_incoming_sell_trades_at_resting_bid_price():
    book = OrderBook()
    assert book.submit(_buy(1, 101.0, 10)) == []
    trades = book.submit(_sell(2, 99.0, 10, ts=5))
    assert trades == [Trade(1, 2, 101.0, 10, 5)]
    assert book.trades == trades


def test_incoming_buy_trades_at_resting_ask_price():
    book = OrderBook()
    book.submit(_sell(1, 99.0, 10))
    trades = book.submit(_buy(2, 101.0, 10, ts=3))
    assert trades == [Trade(2, 1, 99.0, 10, 3)]


def test_no_trade_when_prices_do_not_cross():
    book = OrderBook()
    book.submit(_buy(1, 99.0, 10))
    assert book.submit(_sell(2, 101.0, 10)) == []
    assert book.trades == []


def test_partial_fill_leaves_remainder_resting():
    book = OrderBook()
    book.submit(_buy(1, 100.0, 30))
    first = book.submit(_sell(2, 100.0, 10))
    second = book.submit(_sell(3, 100.0, 20))
    assert [t.quantity for t in first + second] == [10, 20]
    assert {t.buy_order_id for t in first + second} == {1}
    assert book.submit(_sell(4, 100.0, 10)) == []


def test_price_priority_matches_cheapest_ask_first():
    book = OrderBook()
    book.submit(_sell(1, 100.0, 10))
    book.submit(_sell(2, 98.0, 10))
    trades = book.submit(_buy(3, 101.0, 10))
    assert [t.sell_order_id for t in trades] == [2]
    assert trades[0].price == 98.0


def test_time_priority_at_same_price():
    book = OrderBook()
    book.submit(_buy(1, 100.0, 10, ts=1))
    book.submit(_buy(2, 100.0, 10, ts=2))
    trades = book.submit(_sell(3, 100.0, 10, ts=3))
    assert [t.buy_order_id for t in trades] == [1]


def test_sweep_across_levels_and_remainder_rests():
    book = OrderBook()
    book.submit(_sell(1, 100.0, 10))
    book.submit(_sell(2, 101.0, 10))
    trades = book.submit(_buy(3, 102.0, 30))
    assert [(t.sell_order_id, t.price) for t in trades] == [(1, 100.0), (2, 101.0)]
    rest = book.submit(_sell(4, 102.0, 10))
    assert [(t.buy_order_id, t.price) for t in rest] == [(3, 102.0)]


def test_submit_does_not_change_callers_order():
    book = OrderBook()
    book.submit(_sell(1, 100.0, 10))
    order = _buy(2, 100.0, 25)
    book.submit(order)
    assert order.quantity == 25


def test_random_order_ranges():
    trader = Trader("T1", rng=random.Random(7))
    orders = [trader.random_order(i, i) for i in range(300)]
    assert all(95 <= o.price <= 105 and o.price == int(o.price) for o in orders)
    assert {o.quantity for o in orders} <= {10, 20, 30, 40, 50}
    assert {o.type for o in orders} == {OrderType.BUY, OrderType.SELL}
    assert all(o.trader_id == "T1" for o in orders)
    assert [o.id for o in orders] == list(range(300))


def _run(seed, rounds):
    rng = random.Random(seed)
    ex = Exchange()
    for name in ("T1", "T2", "MarketMaker"):
        ex.add_trader(Trader(name, rng=rng))
    return ex.simulate(rounds)


def test_simulate_is_deterministic_and_ids_in_range():
    trades = _run(3, 50)
    assert trades == _run(3, 50)
    assert trades
    for t in trades:
        assert 1 <= t.buy_order_id <= 150
        assert 1 <= t.sell_order_id <= 150
        assert t.quantity > 0
        assert 0 <= t.timestamp < 50


def test_simulate_zero_rounds_has_no_trades():
    assert _run(1, 0) == []


def test_format_trade():
    assert format_trade(Trade(1, 2, 100.0, 10, 0)) == "BUY#1 <--> SELL#2 | Qty: 10 @ $100"


def test_main_prints_header(capsys):
    assert main(["--rounds", "20", "--seed", "5"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "=== Executed Trades ==="


@pytest.mark.parametrize("order_type", [OrderType.BUY, OrderType.SELL])
def test_lone_order_never_trades(order_type):
    book = OrderBook()
    assert book.submit(Order(1, "A", order_type, 100.0, 10, 0)) == []
    assert book.trades == []