"""Base data types for the bank queue simulation."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Customer:
    """A bank customer, from arrival until their service completes."""
    customer_id: int
    arrival_time: int
    service_start_time: Optional[int] = None  # None until a teller accepts the customer

    def start_service(self, current_time: int) -> None:
        """Record the minute a teller accepted this customer. Happens exactly once."""
        if self.service_start_time is not None:
            raise RuntimeError(f"Customer {self.customer_id} already started service")
        if current_time < self.arrival_time:
            raise ValueError("service cannot start before arrival")
        self.service_start_time = current_time

    def wait_time(self) -> float:
        """Minutes spent in the queue before service started."""
        if self.service_start_time is None:
            raise RuntimeError(f"Customer {self.customer_id} has not started service")
        return float(self.service_start_time - self.arrival_time)


@dataclass
class TellerSlot:
    """One teller: idle, or busy with a customer and remaining service minutes."""
    teller_id: int
    busy: bool = False
    remaining_ticks: int = 0
    current_customer: Optional[Customer] = None

    def accept(self, customer: Customer, duration: int) -> None:
        self.busy = True
        self.remaining_ticks = duration
        self.current_customer = customer

    def release(self) -> Customer:
        """Mark the slot idle and hand back the finished customer."""
        customer = self.current_customer
        self.busy = False
        self.remaining_ticks = 0
        self.current_customer = None
        return customer


@dataclass
class SimulationMetrics:
    """Running counters kept while the day is simulated."""
    total_arrived: int = 0
    total_served: int = 0
    max_wait: float = 0.0
    busy_teller_minutes: int = 0

    def record_arrivals(self, count: int):
        self.total_arrived += count

    def record_completion(self, wait: float):
        """Count a served customer and update the running maximum wait."""
        self.total_served += 1
        if wait > self.max_wait:
            self.max_wait = wait

    def utilization(self, teller_count: int, elapsed: int) -> float:
        """Fraction of available teller-minutes spent serving customers."""
        if elapsed > 0 and teller_count > 0:
            return min(self.busy_teller_minutes / (teller_count * elapsed), 1.0)
        return 0.0
