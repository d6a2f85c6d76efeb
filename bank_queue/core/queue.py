"""FIFO waiting line in front of the tellers."""

from collections import deque
from typing import Deque, Optional

from bank_queue.core.base import Customer


class CustomerQueue:
    """Unbounded first-in first-out line of waiting customers.

    Customers never leave the line except through `dequeue`, so service
    order is always arrival order.
    """

    def __init__(self):
        self._customers: Deque[Customer] = deque()

    def enqueue(self, customer: Customer) -> None:
        """Add a customer at the tail of the line."""
        self._customers.append(customer)

    def dequeue(self) -> Optional[Customer]:
        """Remove and return the head customer, or None if nobody is waiting."""
        if not self._customers:
            return None
        return self._customers.popleft()

    def is_empty(self) -> bool:
        return not self._customers

    @property
    def size(self) -> int:
        return len(self._customers)

    def __len__(self) -> int:
        return len(self._customers)

    def clear(self) -> None:
        self._customers.clear()
