import math
import random

import pytest

from quantsims.black_scholes import black_scholes_price, main, norm_cdf, norm_pdf, randn


def test_norm_cdf_at_zero_is_half():
    assert norm_cdf(0.0) == pytest.approx(0.5)


@pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 2.3, 4.0])
def test_norm_cdf_symmetry(x):
    assert norm_cdf(x) + norm_cdf(-x) == pytest.approx(1.0)


def test_norm_cdf_is_monotone_and_bounded():
    xs = [-6.0, -2.0, -0.5, 0.0, 0.5, 2.0, 6.0]
    values = [norm_cdf(x) for x in xs]
    assert values == sorted(values)
    assert all(0.0 <= v <= 1.0 for v in values)
    assert values[-1] == pytest.approx(1.0, abs=1e-8)
    assert values[0] == pytest.approx(0.0, abs=1e-8)


def test_norm_pdf_peak_value():
    assert norm_pdf(0.0) == pytest.approx(0.3989422804014327)


@pytest.mark.parametrize("x", [0.3, 1.0, 2.5])
def test_norm_pdf_is_even_and_matches_density(x):
    assert norm_pdf(x) == pytest.approx(norm_pdf(-x))
    assert norm_pdf(x) == pytest.approx(math.exp(-0.5 * x * x) / math.sqrt(2 * math.pi))


def test_randn_reproducible_with_seeded_rng():
    first = [randn(random.Random(7)) for _ in range(3)]
    rng_a = random.Random(7)
    rng_b = random.Random(7)
    assert [randn(rng_a) for _ in range(5)] == [randn(rng_b) for _ in range(5)]
    assert first[0] == first[1] == first[2]


def test_randn_moments():
    rng = random.Random(123)
    samples = [randn(rng) for _ in range(20000)]
    mean = sum(samples) / len(samples)
    var = sum((x - mean) ** 2 for x in samples) / len(samples)
    assert abs(mean) < 0.05
    assert abs(var - 1.0) < 0.05


def test_call_price_reference_value():
    assert black_scholes_price(100.0, 100.0, 1.0, 0.05, 0.2, True) == pytest.approx(
        10.4506, abs=1e-4
    )


@pytest.mark.parametrize(
    "s,k,t,r,sigma",
    [(100.0, 100.0, 1.0, 0.05, 0.2), (90.0, 110.0, 0.5, 0.01, 0.3), (120.0, 80.0, 2.0, 0.0, 0.15)],
)
def test_put_call_parity(s, k, t, r, sigma):
    call = black_scholes_price(s, k, t, r, sigma, True)
    put = black_scholes_price(s, k, t, r, sigma, False)
    assert call - put == pytest.approx(s - k * math.exp(-r * t))
    assert call >= 0.0
    assert put >= 0.0


def test_call_increases_with_volatility():
    low = black_scholes_price(100.0, 100.0, 1.0, 0.05, 0.1, True)
    high = black_scholes_price(100.0, 100.0, 1.0, 0.05, 0.4, True)
    assert high > low


@pytest.mark.parametrize(
    "s,k,t,sigma", [(100.0, 100.0, 0.0, 0.2), (100.0, 100.0, 1.0, 0.0), (0.0, 100.0, 1.0, 0.2)]
)
def test_invalid_parameters_raise(s, k, t, sigma):
    with pytest.raises(ValueError):
        black_scholes_price(s, k, t, 0.05, sigma, True)


def test_main_prints_prices_satisfying_parity(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("European Call Option Price: ")
    assert lines[1].startswith("European Put Option Price: ")
    call = float(lines[0].split(": ")[1])
    put = float(lines[1].split(": ")[1])
    assert call - put == pytest.approx(100.0 - 100.0 * math.exp(-0.05), abs=1e-3)