# quantsims

A collection of small, self-contained trading and pricing tools:

- Black–Scholes pricing of European calls and puts (`quantsims.black_scholes`)
- a Heston stochastic-volatility path with the call's price and Greeks along it (`quantsims.heston`)
- delta hedging of a call priced with a three-level volatility smile (`quantsims.option_market`)
- a moving-average crossover backtest (`quantsims.backtester`)
- volume-weighted average price (`quantsims.vwap`)
- tick-rule trade classification (`quantsims.tick_rule`)
- a TWAP execution schedule (`quantsims.twap`)
- market-making bots quoting around a random-walk mid price (`quantsims.market_maker`)
- a price–time priority matching engine fed by random traders (`quantsims.exchange`)
- a limit-order-book event replay (`quantsims.lob_replay`)
- order-flow imbalance from top-of-book updates (`quantsims.ofi`)
- per-price liquidity aggregation for heatmaps (`quantsims.heatmap`)

Everything is pure Python with no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

Each tool is installed as its own command. All of them accept `--help`.

| Command | What it does | Arguments and options |
| --- | --- | --- |
| `quantsims-black-scholes` | Prints a European call and put price | `--spot` (100), `--strike` (100), `--maturity` (1), `--rate` (0.05), `--sigma` (0.2) |
| `quantsims-backtest` | 5/20-day moving-average crossover on 10,000 of cash; prints final value and trades | `path` (`data/prices.csv`) |
| `quantsims-vwap` | Prints the VWAP of a trade file | `path` (`trades.csv`) |
| `quantsims-tick-rule` | Labels each trade `unknown`, `buy`, `sell` or `same`, prints and saves them | `path` (`../trades.csv`), `--output` (`classified_trades.csv`) |
| `quantsims-heston` | Simulates one Heston path, prints each step and saves it | `--steps` (252), `--maturity` (1), `--strike` (100), `--rate` (0.01), `--seed`, `--output` (`heston_output.csv`) |
| `quantsims-option-market` | Delta-hedges a smile-priced call each step and logs PnL | `--steps` (50), `--seed`, `--output` (`simulation_log.csv`) |
| `quantsims-market-maker` | Runs two bots, `MM_1` and `MM_2`, and prints their PnL every step | `--steps` (100), `--seed` |
| `quantsims-twap` | Splits a quantity into equal child orders at price 100 and logs them | `--quantity` (1000), `--steps` (10), `--delay` seconds (0.1), `--output` (`ExecutionLog.csv`) |
| `quantsims-exchange` | Three random traders (`T1`, `T2`, `MarketMaker`) send orders; prints the fills | `--rounds` (50), `--seed` |
| `quantsims-lob-replay` | Replays book events and prints the top of book after each | `path` (`../events.csv`) |
| `quantsims-ofi` | Prints and saves the order-flow imbalance and mid price per event | `path` (`../ofi_events.csv`), `--output` (`ofi_output.csv`) |
| `quantsims-heatmap` | Sums size per price level on each side and writes it out | `path` (`orderbook.csv`), `--output` (`heatmap_output.csv`) |

`--seed` makes a simulation reproducible.

## Input files

The file-driven tools read plain comma-separated files:

- backtest: header line, then `date,close`
- VWAP and tick rule: header line, then `timestamp,price,size`
- LOB replay: header line, then `timestamp,type,order_id,side,price,quantity`,
  where `type` is `add`, `modify`, `cancel` or `execute` (others are ignored)
  and `side` is `buy`; any other side value goes to the ask side. Blank lines
  are skipped and malformed lines are reported on standard error and skipped.
- OFI: header line, then `timestamp,type,price,size,side`, where `side` is
  `bid` or `ask`
- heatmap: no header, lines of `side,price,size` with `side` being `bid` or
  `ask`; other sides are ignored and blank lines skipped

In the backtest, VWAP, tick-rule, OFI and heatmap loaders a malformed row
raises `ValueError` naming the line number.

## Using the library

```python
from quantsims.black_scholes import black_scholes_price, norm_cdf

call = black_scholes_price(100.0, 100.0, 1.0, 0.05, 0.2, True)   # about 10.4506
put = black_scholes_price(100.0, 100.0, 1.0, 0.05, 0.2, False)   # about 5.5735
norm_cdf(0.0)                                                     # 0.5
```

`black_scholes_price` raises `ValueError` for a non-positive spot, strike,
maturity or volatility.

```python
from quantsims.vwap import load_trades, calculate_vwap
from quantsims.tick_rule import classify_trades

trades = load_trades("trades.csv")
print(calculate_vwap(trades))            # 0.0 when there is no volume
labels = [c.label for c in classify_trades(trades)]
```

```python
import random
from quantsims.heston import HestonModel, simulate, call_price

# spot, strike, rate, time to maturity, variance
call_price(100.0, 100.0, 0.01, 1.0, 0.04)

model = HestonModel(price=100.0, variance=0.04, mu=0.05, kappa=2.0,
                    theta=0.04, sigma_v=0.3, rho=-0.7, rng=random.Random(1))
for step in simulate(model, strike=100.0, rate=0.01, maturity=1.0, steps=252):
    print(step.time, step.asset, step.option_price, step.delta)
```

```python
from quantsims.exchange import Order, OrderBook, OrderType

book = OrderBook()
book.submit(Order(1, "a", OrderType.SELL, 100.0, 10, 0))
trades = book.submit(Order(2, "b", OrderType.BUY, 101.0, 4, 1))
# one trade of 4 at the resting price 100.0
```

```python
from quantsims.lob_replay import LOB, load_events

lob = LOB()
for event in load_events("events.csv"):
    lob.apply(event)
best_bid, bid_volume, best_ask, ask_volume = lob.top_of_book()
```

```python
from quantsims.ofi import load_events, compute_ofi

for record in compute_ofi(load_events("ofi_events.csv")):
    print(record.timestamp, record.ofi, record.mid_price)
```

Randomised pieces such as `randn`, `correlated_normals`, `random_fill` and
`random_walk`, and the classes `HestonModel`, `Asset`, `Trader` and
`MarketSimulator`, take an optional `random.Random` instance, so a seeded
generator gives reproducible runs.

## Behaviour worth knowing

- In the LOB replay, a price level stays in the book after its last order
  leaves, so the best price can be a level with zero volume.
- `HedgingTrader.write_csv` writes the current cash and share holding on every
  row next to the logged PnL values.
- `TWAPStrategy.execute` uses equal integer slices; any remainder of the total
  quantity is not executed.
- The exchange's `Trader` keeps `capital` and `holdings` but does not update
  them when its orders fill.

## What this package does not do

- It does not connect to any market or data feed; every simulator works on
  random numbers or on local CSV files.
- The heatmap tool only writes the aggregated `side,price,volume` data; it
  does not draw an image.
- There is no persistence or interactive display beyond printed lines and
  CSV output.