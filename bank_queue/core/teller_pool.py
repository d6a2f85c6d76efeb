"""Pool of parallel tellers serving the customer queue."""

import logging
from typing import Callable, List

from bank_queue.core.base import Customer, TellerSlot
from bank_queue.core.queue import CustomerQueue

logger = logging.getLogger(__name__)


class TellerPool:
    """Fixed number of independent tellers.

    Each tick runs `advance` then `assign`, so a teller that finishes a
    customer this minute can take the next one in the same minute.
    """

    def __init__(self,
                 num_tellers: int,
                 service_time_distribution: Callable[[], int]):
        # Non-positive counts are clamped rather than rejected
        self.num_tellers = max(1, int(num_tellers))
        self.service_time_distribution = service_time_distribution
        self.slots: List[TellerSlot] = [TellerSlot(teller_id=i) for i in range(self.num_tellers)]

    def advance(self) -> List[Customer]:
        """Count one minute off every busy teller and collect finished customers.

        Finished customers are returned in teller order.
        """
        completed = []
        for slot in self.slots:
            if not slot.busy:
                continue
            slot.remaining_ticks -= 1
            if slot.remaining_ticks <= 0:
                customer = slot.release()
                completed.append(customer)
                logger.debug("Teller %d finished customer %d (waited %.0f min)",
                             slot.teller_id, customer.customer_id, customer.wait_time())
        return completed

    def assign(self, queue: CustomerQueue, current_time: int) -> int:
        """Give the head of the queue to each idle teller, lowest index first.

        Returns the number of customers who started service.
        """
        started = 0
        for slot in self.slots:
            if queue.is_empty():
                break
            if slot.busy:
                continue
            customer = queue.dequeue()
            customer.start_service(current_time)
            duration = int(self.service_time_distribution())
            slot.accept(customer, duration)
            started += 1
            logger.debug("Teller %d took customer %d at minute %d for %d min",
                         slot.teller_id, customer.customer_id, current_time, duration)
        return started

    def busy_count(self) -> int:
        return sum(1 for slot in self.slots if slot.busy)

    def all_idle(self) -> bool:
        return all(not slot.busy for slot in self.slots)

    def reset(self) -> None:
        self.slots = [TellerSlot(teller_id=i) for i in range(self.num_tellers)]
