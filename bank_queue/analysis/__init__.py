"""Wait time analysis."""

from .statistics import (
    StaffingLevel,
    WaitTimeReport,
    calculate_mean,
    calculate_median,
    calculate_mode,
    calculate_std_dev,
    find_min,
    find_max,
    assess_staffing,
    has_extreme_wait,
    summarize_wait_times,
)

__all__ = [
    'StaffingLevel',
    'WaitTimeReport',
    'calculate_mean',
    'calculate_median',
    'calculate_mode',
    'calculate_std_dev',
    'find_min',
    'find_max',
    'assess_staffing',
    'has_extreme_wait',
    'summarize_wait_times',
]
