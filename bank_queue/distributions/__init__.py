"""Random variable distributions for the bank counter."""

from .random_variables import (
    SERVICE_TIME_MIN,
    SERVICE_TIME_MAX,
    make_rng,
    sample_arrivals,
    sample_service_time,
    poisson_arrival_distribution,
    service_time_distribution,
)

__all__ = [
    'SERVICE_TIME_MIN',
    'SERVICE_TIME_MAX',
    'make_rng',
    'sample_arrivals',
    'sample_service_time',
    'poisson_arrival_distribution',
    'service_time_distribution',
]
