"""Core components of the bank queue simulation."""

from .base import Customer, TellerSlot, SimulationMetrics
from .queue import CustomerQueue
from .teller_pool import TellerPool

__all__ = [
    'Customer',
    'TellerSlot',
    'SimulationMetrics',
    'CustomerQueue',
    'TellerPool'
]
