"""Simulation parameters and their validation."""

import json
import math
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Optional

WINDOW_LENGTH = 480  # minutes in an 8 hour bank day
SERVICE_MIN = 2
SERVICE_MAX = 3


def _whole_number(name: str, value: Any) -> int:
    """Convert a count or length to int, rejecting fractional values like 2.7."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a whole number, got {value!r}")
    if not number.is_integer():
        raise ValueError(f"{name} must be a whole number, got {value!r}")
    return int(number)


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of one simulated bank day."""
    arrival_rate: float = 0.5  # customers per minute
    teller_count: int = 1
    window_length: int = WINDOW_LENGTH
    service_min: int = SERVICE_MIN
    service_max: int = SERVICE_MAX
    seed: Optional[int] = None

    def normalized(self) -> 'SimulationConfig':
        """Return a validated copy, clamping the teller count to at least 1.

        Raises:
            ValueError: if any other parameter is out of range
        """
        rate = float(self.arrival_rate)
        if math.isnan(rate) or math.isinf(rate) or rate < 0:
            raise ValueError(f"arrival_rate must be a finite number >= 0, got {self.arrival_rate}")
        teller_count = _whole_number('teller_count', self.teller_count)
        window_length = _whole_number('window_length', self.window_length)
        service_min = _whole_number('service_min', self.service_min)
        service_max = _whole_number('service_max', self.service_max)
        if window_length < 0:
            raise ValueError(f"window_length must be >= 0, got {self.window_length}")
        if service_min < 1:
            raise ValueError(f"service_min must be >= 1, got {self.service_min}")
        if service_min > service_max:
            raise ValueError(
                f"service_min ({self.service_min}) must not exceed service_max ({self.service_max})")
        return replace(
            self,
            arrival_rate=rate,
            teller_count=max(1, teller_count),
            window_length=window_length,
            service_min=service_min,
            service_max=service_max,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SimulationConfig':
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    @classmethod
    def from_json_file(cls, path: str) -> 'SimulationConfig':
        with open(path, 'r') as f:
            return cls.from_dict(json.load(f))
