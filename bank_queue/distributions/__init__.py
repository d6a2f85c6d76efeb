"""Random variable distributions for the bank queue simulation."""

from .random_variables import (
    make_rng,
    poisson,
    uniform_int,
    poisson_distribution,
    uniform_int_distribution,
    deterministic_distribution,
    sequence_distribution,
)

__all__ = [
    'make_rng',
    'poisson',
    'uniform_int',
    'poisson_distribution',
    'uniform_int_distribution',
    'deterministic_distribution',
    'sequence_distribution',
]
