"""Visualization utilities for bank counter simulations."""

from .plotting import (
    plot_wait_time_distribution,
    plot_queue_length,
    plot_teller_load,
    create_performance_report
)

__all__ = [
    'plot_wait_time_distribution',
    'plot_queue_length',
    'plot_teller_load',
    'create_performance_report'
]
