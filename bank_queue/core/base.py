"""Base data classes for the bank queue simulator."""

from dataclasses import dataclass, field
from typing import List, Optional
import numpy as np


@dataclass
class Customer:
    """A customer waiting for (or receiving) service at the counter."""
    customer_id: int
    arrival_time: int
    service_start_time: Optional[int] = None  # None until a teller picks them up
    wait_time: int = 0

    @property
    def is_served(self) -> bool:
        return self.service_start_time is not None

    def start_service(self, minute: int) -> int:
        """Mark service as started at `minute` and return the wait time."""
        self.service_start_time = minute
        self.wait_time = minute - self.arrival_time
        return self.wait_time


@dataclass
class SimulationMetrics:
    """Counters and the wait-time dataset collected during a run."""
    total_arrived: int = 0
    total_served: int = 0
    max_queue_size: int = 0
    extra_minutes: int = 0
    wait_times: List[int] = field(default_factory=list)
    queue_length_history: List[int] = field(default_factory=list)

    def record_queue_length(self, length: int):
        """Sample the queue length for the current minute."""
        self.queue_length_history.append(length)
        if length > self.max_queue_size:
            self.max_queue_size = length

    def record_wait(self, wait_time: int):
        self.wait_times.append(wait_time)
        self.total_served += 1

    def average_wait_time(self) -> float:
        """Mean wait over every served customer."""
        if self.wait_times:
            return float(np.mean(self.wait_times))
        return 0.0

    def average_queue_length(self) -> float:
        """Mean queue length over the sampled horizon minutes."""
        if self.queue_length_history:
            return float(np.mean(self.queue_length_history))
        return 0.0

    def throughput(self, total_minutes: int) -> float:
        """Customers served per minute."""
        if total_minutes > 0:
            return self.total_served / total_minutes
        return 0.0
