"""Heston stochastic-volatility path simulation with Black-Scholes call greeks."""

from __future__ import annotations

import argparse
import csv
import math
import random
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple

from quantsims.black_scholes import norm_cdf, norm_pdf, randn


def correlated_normals(
    rho: float, rng: random.Random | None = None
) -> tuple[float, float]:
    """Draw two standard normals with correlation ``rho``."""
    if not -1.0 <= rho <= 1.0:
        raise ValueError("correlation must lie in [-1, 1]")
    z1 = randn(rng)
    z2 = randn(rng)
    return z1, rho * z1 + math.sqrt(1.0 - rho * rho) * z2


@dataclass
class HestonModel:
    """Asset price and variance evolving under the Heston dynamics."""

    price: float
    variance: float
    mu: float
    kappa: float
    theta: float
    sigma_v: float
    rho: float
    rng: random.Random | None = field(default=None, repr=False, compare=False)

    def advance(self, dt: float) -> None:
        """Move the price and variance forward by one Euler step of length ``dt``."""
        if dt < 0:
            raise ValueError("time step must be non-negative")
        dw1, dw2 = correlated_normals(self.rho, self.rng)
        v = max(self.variance, 0.0)
        self.price *= math.exp((self.mu - 0.5 * v) * dt + math.sqrt(v * dt) * dw1)
        v += self.kappa * (self.theta - v) * dt + self.sigma_v * math.sqrt(
            max(v, 0.0) * dt
        ) * dw2
        self.variance = max(v, 0.0)


def _d1(s: float, k: float, r: float, t: float, v: float) -> tuple[float, float]:
    """Return d1 and sigma*sqrt(t); a zero denominator gives an infinite or NaN d1."""
    if v < 0:
        raise ValueError("variance must be non-negative")
    vol_sqrt_t = math.sqrt(v) * math.sqrt(t)
    numerator = math.log(s / k) + (r + 0.5 * v) * t
    if vol_sqrt_t == 0:
        d1 = math.copysign(math.inf, numerator) if numerator else math.nan
    else:
        d1 = numerator / vol_sqrt_t
    return d1, vol_sqrt_t


def call_price(s: float, k: float, r: float, t: float, v: float) -> float:
    """Black-Scholes call price using variance ``v``; intrinsic value at expiry."""
    if t <= 0:
        return max(s - k, 0.0)
    d1, vol_sqrt_t = _d1(s, k, r, t, v)
    d2 = d1 - vol_sqrt_t
    return s * norm_cdf(d1) - k * math.exp(-r * t) * norm_cdf(d2)


def call_delta(s: float, k: float, r: float, t: float, v: float) -> float:
    """Delta of a call; 1 or 0 at expiry depending on moneyness."""
    if t <= 0:
        return 1.0 if s > k else 0.0
    d1, _ = _d1(s, k, r, t, v)
    return norm_cdf(d1)


def call_gamma(s: float, k: float, r: float, t: float, v: float) -> float:
    """Gamma of a call; zero at expiry."""
    if t <= 0:
        return 0.0
    d1, vol_sqrt_t = _d1(s, k, r, t, v)
    denominator = s * vol_sqrt_t
    if denominator == 0:
        return math.nan
    return norm_pdf(d1) / denominator


def call_theta(s: float, k: float, r: float, t: float, v: float) -> float:
    """Theta of a call; zero at expiry."""
    if t <= 0:
        return 0.0
    d1, vol_sqrt_t = _d1(s, k, r, t, v)
    d2 = d1 - vol_sqrt_t
    sigma = math.sqrt(v)
    return -(s * sigma * norm_pdf(d1)) / (2.0 * math.sqrt(t)) - r * k * math.exp(
        -r * t
    ) * norm_cdf(d2)


class HestonStep(NamedTuple):
    """State of the path and the option greeks at one time step."""

    step: int
    time: float
    asset: float
    variance: float
    option_price: float
    delta: float
    gamma: float
    theta: float


def simulate(
    model: HestonModel,
    strike: float,
    rate: float,
    maturity: float = 1.0,
    steps: int = 252,
) -> Iterator[HestonStep]:
    """Yield ``steps + 1`` snapshots from time 0 to maturity, advancing the model between them."""
    if steps < 1:
        raise ValueError("steps must be at least 1")
    dt = maturity / steps
    for i in range(steps + 1):
        t = i * dt
        s = model.price
        v = model.variance
        tau = maturity - t
        yield HestonStep(
            i,
            t,
            s,
            v,
            call_price(s, strike, rate, tau, v),
            call_delta(s, strike, rate, tau, v),
            call_gamma(s, strike, rate, tau, v),
            call_theta(s, strike, rate, tau, v),
        )
        model.advance(dt)


def main(argv: list[str] | None = None) -> int:
    """Simulate one Heston path, print each step and save it as CSV."""
    parser = argparse.ArgumentParser(description="Heston option simulation")
    parser.add_argument("--steps", type=int, default=252)
    parser.add_argument("--maturity", type=float, default=1.0)
    parser.add_argument("--strike", type=float, default=100.0)
    parser.add_argument("--rate", type=float, default=0.01)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default="heston_output.csv")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else None
    model = HestonModel(
        price=100.0,
        variance=0.04,
        mu=0.05,
        kappa=2.0,
        theta=0.04,
        sigma_v=0.3,
        rho=-0.7,
        rng=rng,
    )

    with open(args.output, "w", encoding="utf-8", newline="") as fh:
        writer = csv.writer(fh, lineterminator="\n")
        writer.writerow(
            ["Step", "Time", "Asset", "Volatility", "OptionPrice", "Delta", "Gamma", "Theta"]
        )
        for row in simulate(model, args.strike, args.rate, args.maturity, args.steps):
            print(
                f"t={row.time:.4f} | S={row.asset:.4f} | v={row.variance:.4f}"
                f" | Price={row.option_price:.4f} | Δ={row.delta:.4f}"
                f" | Γ={row.gamma:.4f} | Θ={row.theta:.4f}"
            )
            writer.writerow([row.step, *(f"{x:g}" for x in row[1:])])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())