"""Teller countdown timers."""

from typing import List, Optional

from bank_queue.core.validation import check_positive_int


class TellerBank:
    """Fixed set of tellers, each with a busy countdown in minutes.

    A timer of 0 means the teller is free; a positive value is the number of
    minutes left on the current customer.
    """

    def __init__(self, num_tellers: int):
        num_tellers = check_positive_int("Number of tellers", num_tellers)
        self.num_tellers = num_tellers
        self.timers: List[int] = [0] * num_tellers
        self.served_counts: List[int] = [0] * num_tellers
        self.total_service_time = 0

    def tick(self) -> None:
        """Advance every busy teller by one minute."""
        for i, remaining in enumerate(self.timers):
            if remaining > 0:
                self.timers[i] = remaining - 1

    def is_any_busy(self) -> bool:
        return any(remaining > 0 for remaining in self.timers)

    def busy_count(self) -> int:
        return sum(1 for remaining in self.timers if remaining > 0)

    def find_free_index(self) -> Optional[int]:
        """Return the lowest-numbered idle teller, or None if all are busy."""
        for i, remaining in enumerate(self.timers):
            if remaining == 0:
                return i
        return None

    def assign(self, index: int, duration: int) -> None:
        """Start serving a customer at teller `index` for `duration` minutes."""
        self.timers[index] = duration
        self.served_counts[index] += 1
        self.total_service_time += duration

    def utilization(self, total_minutes: int) -> float:
        """Fraction of teller-minutes spent serving."""
        if total_minutes > 0:
            return min(self.total_service_time / (total_minutes * self.num_tellers), 1.0)
        return 0.0

    def reset(self) -> None:
        self.timers = [0] * self.num_tellers
        self.served_counts = [0] * self.num_tellers
        self.total_service_time = 0
