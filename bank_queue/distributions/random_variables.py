"""
Random variable generators for the bank counter.
Every sampler takes an explicit numpy Generator so runs are reproducible.
"""

import numpy as np
from typing import Callable, Optional

from bank_queue.core.exceptions import InvalidParameterError


# Service takes 2, 3 or 4 minutes with equal probability
SERVICE_TIME_MIN = 2
SERVICE_TIME_MAX = 4


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a random generator, seeded when `seed` is given."""
    return np.random.default_rng(seed)


def sample_arrivals(rate: float, rng: np.random.Generator) -> int:
    """
    Generate a Poisson(rate) number of arrivals for one minute.

    Uses Knuth's multiplicative method: multiply uniform draws until the
    product drops to e^(-rate). The product underflows for large rates, so
    results are only trustworthy for rates below about 30.
    """
    if not rate > 0:
        raise InvalidParameterError(f"Arrival rate must be positive, got {rate}")
    threshold = np.exp(-rate)
    product = 1.0
    count = 0
    while True:
        count += 1
        product *= rng.random()
        if product <= threshold:
            break
    return count - 1


def sample_service_time(rng: np.random.Generator) -> int:
    """Generate a service duration in whole minutes, uniform on [2, 4]."""
    return int(rng.integers(SERVICE_TIME_MIN, SERVICE_TIME_MAX + 1))


# Distribution factory functions
def poisson_arrival_distribution(rate: float,
                                 rng: np.random.Generator) -> Callable[[], int]:
    """Create a per-minute arrival count distribution function."""
    if not rate > 0:
        raise InvalidParameterError(f"Arrival rate must be positive, got {rate}")
    return lambda: sample_arrivals(rate, rng)


def service_time_distribution(rng: np.random.Generator) -> Callable[[], int]:
    """Create a service time distribution function."""
    return lambda: sample_service_time(rng)
