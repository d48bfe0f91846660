"""FIFO waiting line in front of the tellers."""

from collections import deque

from bank_queue.core.base import Customer
from bank_queue.core.exceptions import EmptyQueueError


class WaitingQueue:
    """First come, first served line of customers."""

    def __init__(self):
        self._customers = deque()
        self.total_enqueued = 0
        self.total_dequeued = 0

    def enqueue(self, customer: Customer) -> None:
        """Add a customer to the back of the line."""
        self._customers.append(customer)
        self.total_enqueued += 1

    def dequeue(self) -> Customer:
        """Remove and return the customer at the front of the line."""
        if not self._customers:
            raise EmptyQueueError("dequeue from an empty waiting queue")
        self.total_dequeued += 1
        return self._customers.popleft()

    def peek(self) -> Customer:
        if not self._customers:
            raise EmptyQueueError("peek at an empty waiting queue")
        return self._customers[0]

    def is_empty(self) -> bool:
        return not self._customers

    def size(self) -> int:
        return len(self._customers)

    def __len__(self) -> int:
        return len(self._customers)

    def clear(self) -> None:
        self._customers.clear()
        self.total_enqueued = 0
        self.total_dequeued = 0
