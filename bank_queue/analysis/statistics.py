"""
Descriptive statistics and staffing assessment for customer wait times.
All functions take the wait-time dataset of a finished run and never modify it.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, List, Sequence
import numpy as np


# Recommendation thresholds, in minutes
UNDERSTAFFED_MEAN_WAIT = 10
MODERATE_MEAN_WAIT = 5
EXTREME_WAIT = 30


class StaffingLevel(Enum):
    ADEQUATE = "adequate"
    MODERATE = "moderate"
    UNDERSTAFFED = "understaffed"


def _as_array(data: Sequence[int]) -> np.ndarray:
    values = np.asarray(data)
    if values.size == 0:
        raise ValueError("Wait time statistics need at least one observation")
    return values


def calculate_mean(data: Sequence[int]) -> float:
    return float(np.mean(_as_array(data)))


def calculate_median(data: Sequence[int]) -> float:
    """Middle value; the average of the two middle values for even counts."""
    return float(np.median(_as_array(data)))


def calculate_mode(data: Sequence[int]) -> int:
    """
    Most frequent value.

    Ties go to the smallest value, i.e. the first run of maximal length
    in ascending sorted order.
    """
    values, counts = np.unique(_as_array(data), return_counts=True)
    # argmax returns the first maximum, and np.unique sorts ascending
    return int(values[np.argmax(counts)])


def calculate_std_dev(data: Sequence[int], mean: float) -> float:
    """Population standard deviation around a precomputed mean."""
    values = _as_array(data)
    return float(np.sqrt(np.mean((values - mean) ** 2)))


def find_min(data: Sequence[int]) -> int:
    return int(np.min(_as_array(data)))


def find_max(data: Sequence[int]) -> int:
    return int(np.max(_as_array(data)))


def assess_staffing(mean_wait: float) -> StaffingLevel:
    """Classify staffing from the average wait."""
    if mean_wait > UNDERSTAFFED_MEAN_WAIT:
        return StaffingLevel.UNDERSTAFFED
    if mean_wait > MODERATE_MEAN_WAIT:
        return StaffingLevel.MODERATE
    return StaffingLevel.ADEQUATE


def has_extreme_wait(max_wait: int) -> bool:
    """True when at least one customer waited longer than 30 minutes."""
    return max_wait > EXTREME_WAIT


@dataclass
class WaitTimeReport:
    """Summary of a wait-time dataset."""
    count: int
    mean: float
    median: float
    mode: int
    std_dev: float
    variance: float
    minimum: int
    maximum: int
    staffing: StaffingLevel
    extreme_wait: bool

    def recommendations(self) -> List[str]:
        """Plain-language advice for the branch manager."""
        if self.staffing is StaffingLevel.UNDERSTAFFED:
            lines = [f"Average wait time exceeds {UNDERSTAFFED_MEAN_WAIT} minutes!",
                     "Consider hiring additional tellers."]
        elif self.staffing is StaffingLevel.MODERATE:
            lines = ["Wait times are moderate.",
                     "Monitor during peak hours."]
        else:
            lines = ["Wait times are excellent!",
                     "Current staffing is adequate."]

        if self.extreme_wait:
            lines += [f"Some customers waited over {EXTREME_WAIT} minutes!",
                      "This may lead to customer dissatisfaction."]
        return lines

    def to_dict(self) -> Dict:
        data = asdict(self)
        data['staffing'] = self.staffing.value
        return data


def summarize_wait_times(data: Sequence[int]) -> WaitTimeReport:
    """Compute every statistic and both staffing signals for a dataset."""
    values = _as_array(data)
    mean = calculate_mean(values)
    std_dev = calculate_std_dev(values, mean)
    maximum = find_max(values)
    return WaitTimeReport(
        count=int(values.size),
        mean=mean,
        median=calculate_median(values),
        mode=calculate_mode(values),
        std_dev=std_dev,
        variance=std_dev ** 2,
        minimum=find_min(values),
        maximum=maximum,
        staffing=assess_staffing(mean),
        extreme_wait=has_extreme_wait(maximum),
    )
