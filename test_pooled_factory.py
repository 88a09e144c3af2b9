"""
Tests for the pooled creator and product leases.
"""

import threading

import pytest

from creational.factories.factory_method import ConcreteCreator1, Creator
from creational.factories.pooled_factory import PooledCreator
from creational.shared.errors import OwnershipError, PoolExhaustedError


class CountingCreator(Creator):
    def __init__(self):
        self.calls = 0
        self.inner = ConcreteCreator1()

    def create(self):
        self.calls += 1
        return self.inner.create()


def test_released_product_is_reused():
    creator = CountingCreator()
    pool = PooledCreator(creator, max_size=2)

    lease = pool.acquire()
    product = lease.product
    lease.release()

    with pool.acquire() as again:
        assert again.product is product

    assert creator.calls == 1
    assert pool.idle_count == 1
    assert pool.leased_count == 0


def test_concurrent_leases_are_distinct():
    pool = PooledCreator(ConcreteCreator1(), max_size=2)

    first = pool.acquire()
    second = pool.acquire()

    assert first.product is not second.product
    assert pool.size == 2

    first.release()
    second.release()


def test_exhausted_pool_raises():
    pool = PooledCreator(ConcreteCreator1(), max_size=1)
    lease = pool.acquire()

    with pytest.raises(PoolExhaustedError):
        pool.acquire()

    lease.release()
    pool.acquire().release()


def test_release_exactly_once():
    pool = PooledCreator(ConcreteCreator1())
    lease = pool.acquire()
    lease.release()

    with pytest.raises(OwnershipError):
        lease.release()
    with pytest.raises(OwnershipError):
        lease.product

    assert pool.idle_count == 1


def test_context_manager_releases_once():
    pool = PooledCreator(ConcreteCreator1())

    with pool.acquire() as lease:
        lease.release()

    assert lease.released
    assert pool.leased_count == 0
    assert pool.idle_count == 1


def test_invalid_max_size():
    with pytest.raises(ValueError):
        PooledCreator(ConcreteCreator1(), max_size=0)


def test_threads_never_share_a_product():
    pool = PooledCreator(ConcreteCreator1(), max_size=8)
    seen = []
    seen_lock = threading.Lock()
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        lease = pool.acquire()
        with seen_lock:
            seen.append(lease.product)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len({id(p) for p in seen}) == 8
    assert pool.leased_count == 8
