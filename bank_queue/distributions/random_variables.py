"""
Random variable generators for the bank queue simulation.

Every generator takes an explicit random source so a run can be replayed
exactly. Any object with numpy Generator's `random()` and
`integers(low, high, endpoint=True)` methods works as a source.
"""

import math
from typing import Callable, Iterable, Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a random source; seed None draws fresh entropy from the OS."""
    return np.random.default_rng(seed)


# Largest rate sampled in one multiplicative pass (exp(-lam) underflows near 745)
POISSON_CHUNK = 500.0


# Basic distributions
def _multiplicative_poisson(lam: float, rng) -> int:
    limit = math.exp(-lam)
    product = 1.0
    k = 0
    while True:
        k += 1
        product *= rng.random()
        if product <= limit:
            break
    return k - 1


def poisson(lam: float, rng) -> int:
    """Generate a Poisson(lam) count with the multiplicative method.

    Uniform draws are multiplied together until the product falls to
    exp(-lam) or below; the count is the number of draws minus one.
    Rates above POISSON_CHUNK are sampled as a sum of independent
    chunk-sized Poisson counts.
    """
    if lam < 0 or math.isnan(lam) or math.isinf(lam):
        raise ValueError(f"Poisson rate must be finite and >= 0, got {lam}")
    total = 0
    while lam > POISSON_CHUNK:
        total += _multiplicative_poisson(POISSON_CHUNK, rng)
        lam -= POISSON_CHUNK
    return total + _multiplicative_poisson(lam, rng)


def uniform_int(low: int, high: int, rng) -> int:
    """Generate an integer uniformly from the inclusive range [low, high]."""
    if low > high:
        raise ValueError(f"Empty range [{low}, {high}]")
    return int(rng.integers(low, high, endpoint=True))


# Distribution factory functions
def poisson_distribution(lam: float, rng) -> Callable[[], int]:
    """Create a per-minute arrival count distribution."""
    return lambda: poisson(lam, rng)


def uniform_int_distribution(low: int, high: int, rng) -> Callable[[], int]:
    """Create an inclusive integer uniform distribution (service minutes)."""
    return lambda: uniform_int(low, high, rng)


def deterministic_distribution(value: int) -> Callable[[], int]:
    """Create a deterministic distribution (always returns same value)."""
    return lambda: value


def sequence_distribution(values: Iterable[int], default: int = 0) -> Callable[[], int]:
    """
    Create a distribution that replays scripted draws.

    Args:
        values: Draws returned in order
        default: Value returned once the script is exhausted
    """
    iterator = iter(values)
    return lambda: next(iterator, default)
