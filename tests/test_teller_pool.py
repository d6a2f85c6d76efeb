import pytest

from bank_queue.core import Customer, CustomerQueue, TellerPool
from bank_queue.distributions import deterministic_distribution, sequence_distribution


def _queue_of(*arrival_times):
    q = CustomerQueue()
    for i, t in enumerate(arrival_times):
        q.enqueue(Customer(customer_id=i, arrival_time=t))
    return q


def test_teller_count_clamped_to_one():
    pool = TellerPool(0, deterministic_distribution(2))
    assert pool.num_tellers == 1
    assert len(pool.slots) == 1


def test_assign_lowest_index_first_in_fifo_order():
    pool = TellerPool(3, sequence_distribution([2, 3]))
    q = _queue_of(0, 0)

    started = pool.assign(q, current_time=0)

    assert started == 2
    assert pool.slots[0].current_customer.customer_id == 0
    assert pool.slots[0].remaining_ticks == 2
    assert pool.slots[1].current_customer.customer_id == 1
    assert pool.slots[1].remaining_ticks == 3
    assert not pool.slots[2].busy
    assert q.is_empty()


def test_assign_sets_service_start_time():
    pool = TellerPool(1, deterministic_distribution(2))
    q = _queue_of(3)
    pool.assign(q, current_time=7)

    customer = pool.slots[0].current_customer
    assert customer.service_start_time == 7
    assert customer.wait_time() == 4.0


def test_advance_releases_finished_customers():
    pool = TellerPool(1, deterministic_distribution(2))
    pool.assign(_queue_of(0), current_time=0)

    assert pool.advance() == []
    assert pool.slots[0].remaining_ticks == 1

    done = pool.advance()
    assert [c.customer_id for c in done] == [0]
    slot = pool.slots[0]
    assert not slot.busy
    assert slot.remaining_ticks == 0
    assert slot.current_customer is None
    assert pool.all_idle()


def test_freed_teller_takes_next_customer_same_tick():
    pool = TellerPool(1, deterministic_distribution(1))
    q = _queue_of(0, 0)
    pool.assign(q, current_time=0)

    done = pool.advance()
    pool.assign(q, current_time=1)

    assert len(done) == 1
    assert pool.slots[0].current_customer.customer_id == 1
    assert pool.slots[0].current_customer.service_start_time == 1


def test_busy_count_and_reset():
    pool = TellerPool(2, deterministic_distribution(3))
    pool.assign(_queue_of(0), current_time=0)
    assert pool.busy_count() == 1

    pool.reset()
    assert pool.busy_count() == 0


def test_customer_service_starts_once():
    c = Customer(customer_id=0, arrival_time=1)
    c.start_service(2)
    with pytest.raises(RuntimeError):
        c.start_service(3)


def test_customer_cannot_start_before_arrival():
    c = Customer(customer_id=0, arrival_time=5)
    with pytest.raises(ValueError):
        c.start_service(4)


def test_wait_time_requires_started_service():
    c = Customer(customer_id=0, arrival_time=2)
    with pytest.raises(RuntimeError):
        c.wait_time()

    c.start_service(5)
    assert c.wait_time() == 3.0
