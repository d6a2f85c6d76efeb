"""Minute-by-minute simulation of one bank day."""

import enum
import logging
from dataclasses import asdict, dataclass
from typing import Callable, Dict, List, Union

from bank_queue.analysis import summarize
from bank_queue.config import SimulationConfig
from bank_queue.core import Customer, CustomerQueue, SimulationMetrics, TellerPool
from bank_queue.distributions import (
    make_rng,
    poisson_distribution,
    uniform_int_distribution,
)

logger = logging.getLogger(__name__)


class SimulationState(enum.Enum):
    RUNNING = 'running'    # doors open, arrivals admitted
    DRAINING = 'draining'  # doors closed, remaining customers still served
    DONE = 'done'


@dataclass(frozen=True)
class SimulationReport:
    """Outcome of a day in which at least one customer was served."""
    window_length: int
    arrival_rate: float
    teller_count: int
    total_arrived: int
    total_served: int
    sample_count: int
    mean: float
    median: float
    mode: int
    stddev: float
    max_wait: float
    closing_time: int
    teller_utilization: float

    served = True

    def to_dict(self) -> Dict:
        return dict(asdict(self), served=True)


@dataclass(frozen=True)
class NoCustomersServed:
    """Outcome of a day in which nobody was served."""
    window_length: int
    arrival_rate: float
    teller_count: int
    total_arrived: int = 0
    total_served: int = 0
    closing_time: int = 0

    served = False

    def to_dict(self) -> Dict:
        return dict(asdict(self), served=False)


Report = Union[SimulationReport, NoCustomersServed]


class BankSimulation:
    """Drives the arrival source, the customer queue and the teller pool.

    Each tick admits arrivals (only while the doors are open), lets every
    teller advance one minute, hands waiting customers to idle tellers and
    then moves the clock forward. After closing, ticks continue until the
    queue is empty and every teller is idle.
    """

    def __init__(self,
                 arrival_distribution: Callable[[], int],
                 service_time_distribution: Callable[[], int],
                 teller_count: int = 1,
                 window_length: int = 480,
                 arrival_rate: float = 0.0):
        self.arrival_distribution = arrival_distribution
        self.window_length = window_length
        self.arrival_rate = arrival_rate  # reported only; draws come from arrival_distribution

        self.queue = CustomerQueue()
        self.tellers = TellerPool(teller_count, service_time_distribution)
        self.metrics = SimulationMetrics()
        self.wait_sample: List[float] = []
        self.clock = 0
        self.next_customer_id = 0

        # Per-tick history
        self.arrival_history: List[int] = []
        self.queue_length_history: List[int] = []
        self.busy_tellers_history: List[int] = []

    @classmethod
    def from_config(cls, config: SimulationConfig, rng=None) -> 'BankSimulation':
        """Build a simulation whose draws all come from one random source."""
        config = config.normalized()
        if rng is None:
            rng = make_rng(config.seed)
        return cls(
            arrival_distribution=poisson_distribution(config.arrival_rate, rng),
            service_time_distribution=uniform_int_distribution(
                config.service_min, config.service_max, rng),
            teller_count=config.teller_count,
            window_length=config.window_length,
            arrival_rate=config.arrival_rate,
        )

    @property
    def teller_count(self) -> int:
        return self.tellers.num_tellers

    @property
    def state(self) -> SimulationState:
        if self.clock < self.window_length:
            return SimulationState.RUNNING
        if self.queue.is_empty() and self.tellers.all_idle():
            return SimulationState.DONE
        return SimulationState.DRAINING

    def _admit_arrivals(self) -> int:
        count = int(self.arrival_distribution())
        for _ in range(count):
            customer = Customer(customer_id=self.next_customer_id, arrival_time=self.clock)
            self.next_customer_id += 1
            self.queue.enqueue(customer)
        self.metrics.record_arrivals(count)
        self.arrival_history.append(count)
        return count

    def _record_completion(self, customer: Customer) -> None:
        wait = customer.wait_time()
        self.wait_sample.append(wait)
        self.metrics.record_completion(wait)

    def step(self) -> SimulationState:
        """Simulate one minute and return the state afterwards."""
        state = self.state
        if state is SimulationState.DONE:
            raise RuntimeError("Simulation already finished")

        if state is SimulationState.RUNNING:
            arrivals = self._admit_arrivals()
            if arrivals:
                logger.debug("Minute %d: %d arrival(s)", self.clock, arrivals)

        for customer in self.tellers.advance():
            self._record_completion(customer)
        self.tellers.assign(self.queue, self.clock)

        busy = self.tellers.busy_count()
        self.metrics.busy_teller_minutes += busy
        self.queue_length_history.append(self.queue.size)
        self.busy_tellers_history.append(busy)

        self.clock += 1

        new_state = self.state
        if new_state is not state:
            logger.info("Minute %d: %s -> %s (queue=%d, busy tellers=%d)",
                        self.clock, state.name, new_state.name, self.queue.size, busy)
        return new_state

    def run(self) -> Report:
        """Tick until the day is done and return the report."""
        while self.state is not SimulationState.DONE:
            self.step()
        logger.info("Day finished at minute %d: %d arrived, %d served",
                    self.clock, self.metrics.total_arrived, self.metrics.total_served)
        return self.report()

    def report(self) -> Report:
        if not self.wait_sample:
            return NoCustomersServed(
                window_length=self.window_length,
                arrival_rate=self.arrival_rate,
                teller_count=self.teller_count,
                total_arrived=self.metrics.total_arrived,
                closing_time=self.clock,
            )

        stats = summarize(self.wait_sample, max_wait=self.metrics.max_wait)
        return SimulationReport(
            window_length=self.window_length,
            arrival_rate=self.arrival_rate,
            teller_count=self.teller_count,
            total_arrived=self.metrics.total_arrived,
            total_served=self.metrics.total_served,
            sample_count=stats.count,
            mean=stats.mean,
            median=stats.median,
            mode=stats.mode,
            stddev=stats.stddev,
            max_wait=stats.max_wait,
            closing_time=self.clock,
            teller_utilization=self.metrics.utilization(self.teller_count, self.clock),
        )

    def reset(self) -> None:
        """Reset the simulation to the start of the day."""
        self.queue.clear()
        self.tellers.reset()
        self.metrics = SimulationMetrics()
        self.wait_sample = []
        self.clock = 0
        self.next_customer_id = 0
        self.arrival_history = []
        self.queue_length_history = []
        self.busy_tellers_history = []


def run_bank_day(config: SimulationConfig, rng=None) -> Report:
    """Simulate one bank day with the given parameters."""
    return BankSimulation.from_config(config, rng=rng).run()
