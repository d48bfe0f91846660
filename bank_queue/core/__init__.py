"""Core components of the bank queue simulator."""

from .base import Customer, SimulationMetrics
from .exceptions import SimulationError, InvalidParameterError, EmptyQueueError
from .queue import WaitingQueue
from .tellers import TellerBank
from .validation import check_positive_int, check_positive_rate

__all__ = [
    'Customer',
    'SimulationMetrics',
    'SimulationError',
    'InvalidParameterError',
    'EmptyQueueError',
    'WaitingQueue',
    'TellerBank',
    'check_positive_int',
    'check_positive_rate'
]
