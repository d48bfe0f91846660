"""Minute-by-minute simulation clock for the bank counter."""

import logging
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional
import numpy as np

from bank_queue.core import Customer, SimulationMetrics, WaitingQueue, TellerBank
from bank_queue.core.validation import check_positive_int, check_positive_rate
from bank_queue.distributions.random_variables import (
    make_rng, sample_arrivals, sample_service_time
)

logger = logging.getLogger(__name__)

# An 8-hour business day
DEFAULT_HORIZON = 480


@dataclass
class SimulationResult:
    """Everything a finished run hands to the report and the renderers."""
    arrival_rate: float
    num_tellers: int
    horizon: int
    total_arrived: int
    total_served: int
    max_queue_size: int
    extra_minutes: int
    wait_times: List[int] = field(default_factory=list)
    queue_length_history: List[int] = field(default_factory=list)
    served_per_teller: List[int] = field(default_factory=list)
    teller_utilization: float = 0.0

    @property
    def total_minutes(self) -> int:
        """Horizon plus the minutes needed to drain the line."""
        return self.horizon + self.extra_minutes

    def to_dict(self) -> Dict:
        return asdict(self)


class BankSimulation:
    """Drives arrivals, the waiting line and the tellers over logical minutes.

    The run has two phases. During the horizon customers arrive every minute;
    afterwards the doors close and the tellers keep serving until the line is
    empty and every teller is idle.
    """

    def __init__(self,
                 arrival_rate: float,
                 num_tellers: int = 1,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None,
                 horizon: int = DEFAULT_HORIZON):
        self.arrival_rate = check_positive_rate("Arrival rate", arrival_rate)
        self.num_tellers = check_positive_int("Number of tellers", num_tellers)
        self.horizon = check_positive_int("Horizon", horizon)
        self.rng = rng if rng is not None else make_rng(seed)

        self.queue = WaitingQueue()
        self.tellers = TellerBank(self.num_tellers)
        self.metrics = SimulationMetrics()
        self.current_time = 0
        self.next_customer_id = 0

    def _admit_arrivals(self, minute: int) -> None:
        """Enqueue this minute's Poisson batch of new customers."""
        arrivals = sample_arrivals(self.arrival_rate, self.rng)
        for _ in range(arrivals):
            customer = Customer(customer_id=self.next_customer_id, arrival_time=minute)
            self.next_customer_id += 1
            self.queue.enqueue(customer)
            self.metrics.total_arrived += 1

    def _assign_tellers(self, minute: int) -> None:
        """Hand the head of the line to each free teller, lowest index first."""
        while not self.queue.is_empty():
            index = self.tellers.find_free_index()
            if index is None:
                break
            customer = self.queue.dequeue()
            self.metrics.record_wait(customer.start_service(minute))
            # Service times are at least 2, so the teller is busy until a later tick
            self.tellers.assign(index, sample_service_time(self.rng))

    def _run_horizon(self) -> None:
        for minute in range(self.horizon):
            self.current_time = minute
            self._admit_arrivals(minute)
            # Peak is taken after arrivals, before anyone is served
            self.metrics.record_queue_length(self.queue.size())
            self.tellers.tick()
            self._assign_tellers(minute)

    def _drain(self) -> None:
        logger.debug("Horizon over with %d waiting and %d busy tellers, draining",
                     self.queue.size(), self.tellers.busy_count())
        while not self.queue.is_empty() or self.tellers.is_any_busy():
            self.metrics.extra_minutes += 1
            self.current_time = self.horizon + self.metrics.extra_minutes
            self.tellers.tick()
            self._assign_tellers(self.current_time)

    def simulate(self) -> SimulationResult:
        """Run the horizon and the drain phase and return the collected data."""
        self._clear()
        logger.info("Simulating %d minutes with lambda=%.4f and %d teller(s)",
                    self.horizon, self.arrival_rate, self.num_tellers)
        self._run_horizon()
        self._drain()
        logger.info("Run complete: %d arrived, %d served, max queue %d, %d extra minutes",
                    self.metrics.total_arrived, self.metrics.total_served,
                    self.metrics.max_queue_size, self.metrics.extra_minutes)
        return self.result()

    def result(self) -> SimulationResult:
        total_minutes = self.horizon + self.metrics.extra_minutes
        return SimulationResult(
            arrival_rate=self.arrival_rate,
            num_tellers=self.num_tellers,
            horizon=self.horizon,
            total_arrived=self.metrics.total_arrived,
            total_served=self.metrics.total_served,
            max_queue_size=self.metrics.max_queue_size,
            extra_minutes=self.metrics.extra_minutes,
            wait_times=list(self.metrics.wait_times),
            queue_length_history=list(self.metrics.queue_length_history),
            served_per_teller=list(self.tellers.served_counts),
            teller_utilization=self.tellers.utilization(total_minutes),
        )

    def get_metrics_summary(self) -> Dict:
        """Get a summary of the run's metrics."""
        total_minutes = self.horizon + self.metrics.extra_minutes
        return {
            'system': {
                'total_arrived': self.metrics.total_arrived,
                'total_served': self.metrics.total_served,
                'max_queue_size': self.metrics.max_queue_size,
                'extra_minutes': self.metrics.extra_minutes,
                'average_wait_time': self.metrics.average_wait_time(),
                'average_queue_length': self.metrics.average_queue_length(),
                'throughput': self.metrics.throughput(total_minutes),
            },
            'tellers': {
                'num_tellers': self.num_tellers,
                'utilization': self.tellers.utilization(total_minutes),
                'served_per_teller': list(self.tellers.served_counts),
            }
        }

    def _clear(self) -> None:
        self.queue.clear()
        self.tellers.reset()
        self.metrics = SimulationMetrics()
        self.current_time = 0
        self.next_customer_id = 0

    def reset(self, seed: Optional[int] = None) -> None:
        """Reset the run to its initial state, reseeding if `seed` is given."""
        self._clear()
        if seed is not None:
            self.rng = make_rng(seed)


def run_simulation(arrival_rate: float,
                   num_tellers: int = 1,
                   seed: Optional[int] = None,
                   horizon: int = DEFAULT_HORIZON) -> SimulationResult:
    """Run a single simulation and return its result."""
    simulation = BankSimulation(arrival_rate, num_tellers, seed=seed, horizon=horizon)
    return simulation.simulate()
