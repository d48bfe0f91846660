"""Simulation clock for the bank counter."""

from .bank_simulation import (
    DEFAULT_HORIZON, BankSimulation, SimulationResult, run_simulation
)

__all__ = [
    'DEFAULT_HORIZON',
    'BankSimulation',
    'SimulationResult',
    'run_simulation'
]
