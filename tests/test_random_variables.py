"""Tests for the arrival and service time samplers."""

from collections import Counter

import numpy as np
import pytest

from bank_queue.core.exceptions import InvalidParameterError
from bank_queue.distributions import (
    SERVICE_TIME_MAX,
    SERVICE_TIME_MIN,
    make_rng,
    poisson_arrival_distribution,
    sample_arrivals,
    sample_service_time,
    service_time_distribution,
)


def test_poisson_sample_mean_matches_rate(rng):
    samples = [sample_arrivals(3.0, rng) for _ in range(10_000)]

    assert min(samples) >= 0
    assert np.mean(samples) == pytest.approx(3.0, abs=0.1)


def test_poisson_sample_variance_matches_rate(rng):
    samples = np.array([sample_arrivals(2.0, rng) for _ in range(10_000)])

    # Poisson variance equals its mean
    assert samples.var() == pytest.approx(2.0, abs=0.2)


def test_tiny_rate_mostly_produces_no_arrivals(rng):
    samples = [sample_arrivals(0.01, rng) for _ in range(1_000)]

    assert all(s >= 0 for s in samples)
    assert sum(samples) < 40


@pytest.mark.parametrize("rate", [0, -1.5, float("nan")])
def test_non_positive_rate_is_rejected(rate, rng):
    with pytest.raises(InvalidParameterError):
        sample_arrivals(rate, rng)


def test_service_time_is_uniform_on_two_to_four(rng):
    counts = Counter(sample_service_time(rng) for _ in range(9_000))

    assert set(counts) == {2, 3, 4}
    assert SERVICE_TIME_MIN == 2 and SERVICE_TIME_MAX == 4
    for value in (2, 3, 4):
        assert counts[value] == pytest.approx(3_000, abs=300)


def test_service_time_is_a_plain_int(rng):
    assert type(sample_service_time(rng)) is int


def test_same_seed_gives_same_samples():
    first, second = make_rng(99), make_rng(99)

    assert ([sample_arrivals(1.5, first) for _ in range(50)]
            == [sample_arrivals(1.5, second) for _ in range(50)])


def test_distribution_factories_share_the_generator():
    draw_arrivals = poisson_arrival_distribution(4.0, make_rng(1))
    draw_service = service_time_distribution(make_rng(1))

    assert all(draw_arrivals() >= 0 for _ in range(100))
    assert all(2 <= draw_service() <= 4 for _ in range(100))


def test_factory_rejects_bad_rate():
    with pytest.raises(InvalidParameterError):
        poisson_arrival_distribution(0.0, make_rng(1))
