"""Simulation loop for the bank queue."""

from .bank_simulation import (
    BankSimulation,
    NoCustomersServed,
    SimulationReport,
    SimulationState,
    run_bank_day,
)

__all__ = [
    'BankSimulation',
    'NoCustomersServed',
    'SimulationReport',
    'SimulationState',
    'run_bank_day',
]
