"""Summary statistics over the wait times of served customers."""

from dataclasses import asdict, dataclass
from typing import Optional, Sequence

import numpy as np


@dataclass(frozen=True)
class WaitStatistics:
    """Summary of a wait-time sample; all zero for an empty sample."""
    count: int
    mean: float
    median: float
    mode: int
    stddev: float
    max_wait: float

    def to_dict(self) -> dict:
        return asdict(self)


def mean(sample: Sequence[float]) -> float:
    if len(sample) == 0:
        return 0.0
    return float(np.mean(sample))


def stddev(sample: Sequence[float], mu: Optional[float] = None) -> float:
    """Population standard deviation (divides by N), around `mu` when given."""
    if len(sample) == 0:
        return 0.0
    if mu is None:
        mu = mean(sample)
    values = np.asarray(sample, dtype=float)
    return float(np.sqrt(np.sum((values - mu) ** 2) / len(values)))


def median(sample: Sequence[float]) -> float:
    """Middle value, or mean of the two middle values. The input is left untouched."""
    if len(sample) == 0:
        return 0.0
    ordered = np.sort(np.asarray(sample, dtype=float))  # np.sort returns a copy
    n = len(ordered)
    if n % 2 == 0:
        return float((ordered[n // 2 - 1] + ordered[n // 2]) / 2.0)
    return float(ordered[n // 2])


def round_half_away(values) -> np.ndarray:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    values = np.asarray(values, dtype=float)
    return (np.sign(values) * np.floor(np.abs(values) + 0.5)).astype(int)


def mode(sample: Sequence[float]) -> int:
    """Most frequent wait after rounding to whole minutes.

    Ties go to the smallest value.
    """
    if len(sample) == 0:
        return 0
    rounded = round_half_away(sample)
    lowest = int(rounded.min())
    freq = np.bincount(rounded - lowest)
    # argmax returns the first maximum, i.e. the smallest tied value
    return int(np.argmax(freq)) + lowest


def maximum(sample: Sequence[float]) -> float:
    if len(sample) == 0:
        return 0.0
    return float(np.max(sample))


def summarize(sample: Sequence[float], max_wait: Optional[float] = None) -> WaitStatistics:
    """
    Compute every statistic over a wait sample.

    Args:
        sample: Wait times in minutes, one per served customer
        max_wait: Running maximum tracked during the run; recomputed when omitted
    """
    mu = mean(sample)
    return WaitStatistics(
        count=len(sample),
        mean=mu,
        median=median(sample),
        mode=mode(sample),
        stddev=stddev(sample, mu),
        max_wait=maximum(sample) if max_wait is None else float(max_wait),
    )
