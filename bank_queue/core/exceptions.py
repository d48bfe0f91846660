"""Exceptions raised by the bank queue simulator."""


class SimulationError(Exception):
    """Base class for simulator errors."""


class InvalidParameterError(SimulationError, ValueError):
    """A simulation parameter is out of range (rate <= 0, tellers <= 0, ...)."""


class EmptyQueueError(SimulationError, IndexError):
    """Dequeue or peek on an empty waiting queue.

    The simulation clock guards every dequeue with an emptiness check, so
    seeing this from a run means the clock itself is broken.
    """
