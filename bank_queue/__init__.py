"""Discrete-event simulation of a single bank day with Poisson arrivals."""

from bank_queue.config import SimulationConfig
from bank_queue.system import (
    BankSimulation,
    NoCustomersServed,
    SimulationReport,
    SimulationState,
    run_bank_day,
)

__all__ = [
    'SimulationConfig',
    'BankSimulation',
    'NoCustomersServed',
    'SimulationReport',
    'SimulationState',
    'run_bank_day',
]
