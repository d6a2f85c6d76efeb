"""Statistical analysis of simulation output."""

from .wait_statistics import (
    WaitStatistics,
    mean,
    stddev,
    median,
    mode,
    maximum,
    round_half_away,
    summarize,
)

__all__ = [
    'WaitStatistics',
    'mean',
    'stddev',
    'median',
    'mode',
    'maximum',
    'round_half_away',
    'summarize',
]
