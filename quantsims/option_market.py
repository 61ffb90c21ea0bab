"""Delta hedging of a call priced with a three-level volatility smile."""

from __future__ import annotations

import argparse
import csv
import math
import random
from dataclasses import dataclass, field
from os import PathLike

from quantsims.black_scholes import norm_cdf, norm_pdf, randn


@dataclass
class Asset:
    """Underlying following driftless geometric Brownian motion."""

    price: float
    sigma: float
    rng: random.Random | None = field(default=None, repr=False, compare=False)

    def advance(self, dt: float) -> None:
        """Move the price forward by ``dt``."""
        if dt < 0:
            raise ValueError("time step must be non-negative")
        dw = randn(self.rng) * math.sqrt(dt)
        self.price *= math.exp(-0.5 * self.sigma * self.sigma * dt + self.sigma * dw)


@dataclass
class SmileOption:
    """European call whose volatility depends on moneyness."""

    strike: float
    maturity: float
    rate: float
    vol_itm: float
    vol_atm: float
    vol_otm: float

    def __post_init__(self) -> None:
        if self.strike <= 0:
            raise ValueError("strike must be positive")
        if min(self.vol_itm, self.vol_atm, self.vol_otm) <= 0:
            raise ValueError("volatilities must be positive")

    def volatility(self, s: float) -> float:
        """Volatility for spot ``s``: ITM below 0.95 moneyness, OTM above 1.05."""
        moneyness = s / self.strike
        if moneyness < 0.95:
            return self.vol_itm
        if moneyness > 1.05:
            return self.vol_otm
        return self.vol_atm

    def _d1(self, s: float, tau: float) -> tuple[float, float]:
        sigma = self.volatility(s)
        vol_sqrt_tau = sigma * math.sqrt(tau)
        d1 = (math.log(s / self.strike) + (self.rate + 0.5 * sigma * sigma) * tau) / vol_sqrt_tau
        return d1, vol_sqrt_tau

    def price(self, s: float, t: float) -> float:
        """Call value at spot ``s`` and time ``t``."""
        tau = self.maturity - t
        if tau <= 0:
            return max(s - self.strike, 0.0)
        d1, vol_sqrt_tau = self._d1(s, tau)
        d2 = d1 - vol_sqrt_tau
        return s * norm_cdf(d1) - self.strike * math.exp(-self.rate * tau) * norm_cdf(d2)

    def delta(self, s: float, t: float) -> float:
        """Call delta at spot ``s`` and time ``t``."""
        tau = self.maturity - t
        if tau <= 0:
            return 1.0 if s > self.strike else 0.0
        d1, _ = self._d1(s, tau)
        return norm_cdf(d1)

    def gamma(self, s: float, t: float) -> float:
        """Call gamma at spot ``s`` and time ``t``."""
        tau = self.maturity - t
        if tau <= 0:
            return 0.0
        d1, vol_sqrt_tau = self._d1(s, tau)
        return norm_pdf(d1) / (s * vol_sqrt_tau)

    def theta(self, s: float, t: float) -> float:
        """Call theta at spot ``s`` and time ``t``."""
        tau = self.maturity - t
        if tau <= 0:
            return 0.0
        d1, vol_sqrt_tau = self._d1(s, tau)
        d2 = d1 - vol_sqrt_tau
        sigma = self.volatility(s)
        return -(s * sigma * norm_pdf(d1)) / (2.0 * math.sqrt(tau)) - self.rate * self.strike * math.exp(
            -self.rate * tau
        ) * norm_cdf(d2)

    def advance(self, dt: float) -> None:
        """Shorten the remaining maturity by ``dt``."""
        self.maturity -= dt


@dataclass
class HedgingTrader:
    """Short-call book that delta hedges with the underlying."""

    cash: float = 0.0
    shares: float = 0.0
    pnl_log: list[float] = field(default_factory=list)

    def hedge(self, target_delta: float, price: float) -> None:
        """Trade shares at ``price`` until the holding equals ``target_delta``."""
        diff = target_delta - self.shares
        self.cash -= diff * price
        self.shares += diff

    def pnl(self, option_value: float, price: float) -> float:
        """Value of cash plus shares less the option liability."""
        return self.cash + self.shares * price - option_value

    def record(self, option_value: float, price: float) -> None:
        """Append the current P&L to the log."""
        self.pnl_log.append(self.pnl(option_value, price))

    def write_csv(self, path: str | PathLike) -> None:
        """Write the P&L log with the current cash and share holding on each row."""
        with open(path, "w", encoding="utf-8", newline="") as fh:
            writer = csv.writer(fh, lineterminator="\n")
            writer.writerow(["Step", "Cash", "Shares", "PnL"])
            for step, value in enumerate(self.pnl_log):
                writer.writerow([step, f"{self.cash:g}", f"{self.shares:g}", f"{value:g}"])


def main(argv: list[str] | None = None) -> int:
    """Run the hedging simulation, print each step and save it as CSV."""
    parser = argparse.ArgumentParser(description="Option market hedging simulation")
    parser.add_argument("--steps", type=int, default=50)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default="simulation_log.csv")
    args = parser.parse_args(argv)
    if args.steps < 1:
        parser.error("steps must be at least 1")

    rng = random.Random(args.seed) if args.seed is not None else None
    asset = Asset(100.0, 0.2, rng)
    option = SmileOption(100.0, 1.0, 0.05, 0.25, 0.20, 0.15)
    trader = HedgingTrader()
    dt = 1.0 / args.steps

    with open(args.output, "w", encoding="utf-8", newline="") as fh:
        writer = csv.writer(fh, lineterminator="\n")
        writer.writerow(["Step", "Asset", "Option", "Delta", "Gamma", "Theta", "PnL"])
        for step in range(args.steps):
            s = asset.price
            time_left = option.maturity
            option_price = option.price(s, time_left)
            delta = option.delta(s, time_left)
            gamma = option.gamma(s, time_left)
            theta = option.theta(s, time_left)

            trader.hedge(delta, s)
            trader.record(option_price, s)
            pnl = trader.pnl(option_price, s)

            writer.writerow(
                [step, *(f"{x:g}" for x in (s, option_price, delta, gamma, theta, pnl))]
            )
            print(
                f"Step {step} | S={s:.4f} | Option={option_price:.4f} | Δ={delta:.4f}"
                f" | Γ={gamma:.4f} | Θ={theta:.4f} | PnL={pnl:.4f}"
            )
            asset.advance(dt)
            option.advance(dt)

    print(f"\nSimulation complete. Data saved to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())