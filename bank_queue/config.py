"""Run configuration, loadable from a JSON file."""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from bank_queue.core.exceptions import InvalidParameterError
from bank_queue.core.validation import check_positive_int, check_positive_rate
from bank_queue.system.bank_simulation import DEFAULT_HORIZON


@dataclass
class SimulationConfig:
    """Parameters for one or more simulation runs."""
    arrival_rate: Optional[float] = None  # customers per minute (lambda)
    num_tellers: int = 1
    horizon: int = DEFAULT_HORIZON
    seed: Optional[int] = None
    replications: int = 1

    def validate(self) -> None:
        if self.arrival_rate is None:
            raise InvalidParameterError("Arrival rate is required")
        check_positive_rate("Lambda", self.arrival_rate)
        check_positive_int("Number of tellers", self.num_tellers)
        check_positive_int("Horizon", self.horizon)
        check_positive_int("Number of replications", self.replications)
        if self.seed is not None and (isinstance(self.seed, bool)
                                      or not isinstance(self.seed, int)):
            raise InvalidParameterError(f"Seed must be an integer, got {self.seed!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SimulationConfig':
        """Build a config from a mapping, ignoring keys it does not know."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: Union[str, Path]) -> SimulationConfig:
    """Read a SimulationConfig from a JSON file."""
    with open(path, 'r') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise InvalidParameterError(f"Configuration in {path} must be a JSON object")
    return SimulationConfig.from_dict(data)
