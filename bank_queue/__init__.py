"""Bank teller queue simulation package."""

from bank_queue.core import (
    Customer, SimulationMetrics, WaitingQueue, TellerBank,
    SimulationError, InvalidParameterError, EmptyQueueError
)
from bank_queue.system import BankSimulation, SimulationResult, run_simulation
from bank_queue.analysis import WaitTimeReport, StaffingLevel, summarize_wait_times
from bank_queue.config import SimulationConfig, load_config

__all__ = [
    'Customer',
    'SimulationMetrics',
    'WaitingQueue',
    'TellerBank',
    'SimulationError',
    'InvalidParameterError',
    'EmptyQueueError',
    'BankSimulation',
    'SimulationResult',
    'run_simulation',
    'WaitTimeReport',
    'StaffingLevel',
    'summarize_wait_times',
    'SimulationConfig',
    'load_config'
]
