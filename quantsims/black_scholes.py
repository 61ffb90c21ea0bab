"""Black-Scholes pricing of European options and normal-distribution helpers."""

from __future__ import annotations

import argparse
import math
import random

_INV_SQRT_2PI = 0.3989422804014327
_DEFAULT_RNG = random.Random()


def norm_cdf(x: float) -> float:
    """Cumulative distribution function of the standard normal distribution."""
    return 0.5 * math.erfc(-x / math.sqrt(2.0))


def norm_pdf(x: float) -> float:
    """Probability density function of the standard normal distribution."""
    return _INV_SQRT_2PI * math.exp(-0.5 * x * x)


def randn(rng: random.Random | None = None) -> float:
    """Draw one sample from the standard normal distribution."""
    return (rng or _DEFAULT_RNG).gauss(0.0, 1.0)


def black_scholes_price(
    s: float, k: float, t: float, r: float, sigma: float, is_call: bool = True
) -> float:
    """Price a European call or put with the Black-Scholes formula."""
    if s <= 0 or k <= 0:
        raise ValueError("spot and strike must be positive")
    if t <= 0 or sigma <= 0:
        raise ValueError("time to maturity and volatility must be positive")

    vol_sqrt_t = sigma * math.sqrt(t)
    d1 = (math.log(s / k) + (r + 0.5 * sigma * sigma) * t) / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    discounted_strike = k * math.exp(-r * t)

    if is_call:
        return s * norm_cdf(d1) - discounted_strike * norm_cdf(d2)
    return discounted_strike * norm_cdf(-d2) - s * norm_cdf(-d1)


def main(argv: list[str] | None = None) -> int:
    """Print call and put prices for the given contract parameters."""
    parser = argparse.ArgumentParser(description="Black-Scholes option pricer")
    parser.add_argument("--spot", type=float, default=100.0)
    parser.add_argument("--strike", type=float, default=100.0)
    parser.add_argument("--maturity", type=float, default=1.0)
    parser.add_argument("--rate", type=float, default=0.05)
    parser.add_argument("--sigma", type=float, default=0.2)
    args = parser.parse_args(argv)

    params = (args.spot, args.strike, args.maturity, args.rate, args.sigma)
    call_price = black_scholes_price(*params, is_call=True)
    put_price = black_scholes_price(*params, is_call=False)

    print(f"European Call Option Price: {call_price:g}")
    print(f"European Put Option Price: {put_price:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())