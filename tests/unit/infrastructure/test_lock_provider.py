"""Tests for LockProvider implementations.

Tests cover:
- InMemoryLockProvider per-resource locking
- Lock release on exception
- NoOpLockProvider for single-threaded tests
- Concurrent access serialization
"""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, wait

import pytest

from commerce_core.application.ports import LockProvider, resource_key
from commerce_core.domain.value_objects import OrderId
from commerce_core.infrastructure import InMemoryLockProvider, NoOpLockProvider

# =============================================================================
# InMemoryLockProvider Tests
# =============================================================================


class TestInMemoryLockProviderBasicBehavior:
    def test_implements_lock_provider_interface(self) -> None:
        assert isinstance(InMemoryLockProvider(), LockProvider)

    def test_same_resource_can_be_acquired_sequentially(self) -> None:
        provider = InMemoryLockProvider()
        acquisitions = 0

        with provider.acquire("order:1"):
            acquisitions += 1
        with provider.acquire("order:1"):
            acquisitions += 1

        assert acquisitions == 2

    def test_different_resources_use_different_locks(self) -> None:
        provider = InMemoryLockProvider()

        with provider.acquire("order:1"), provider.acquire("payment:1"):
            pass

    def test_lock_released_on_exception(self) -> None:
        provider = InMemoryLockProvider()

        with pytest.raises(RuntimeError), provider.acquire("order:1"):
            raise RuntimeError("Simulated failure")

        acquired = False
        with provider.acquire("order:1"):
            acquired = True

        assert acquired is True

    def test_tracks_each_distinct_key_once(self) -> None:
        provider = InMemoryLockProvider()

        with provider.acquire("order:1"):
            pass
        with provider.acquire("order:1"), provider.acquire("payment:1"):
            pass

        assert provider.tracked_keys == 2


class TestInMemoryLockProviderConcurrency:
    def test_logs_when_waiting_for_a_held_lock(self, caplog: pytest.LogCaptureFixture) -> None:
        provider = InMemoryLockProvider()
        entered = threading.Event()

        def holder() -> None:
            with provider.acquire("order:busy"):
                entered.set()
                time.sleep(0.05)

        def waiter() -> None:
            entered.wait(timeout=2)
            with provider.acquire("order:busy"):
                pass

        with caplog.at_level(logging.DEBUG, logger="commerce_core.infrastructure.lock_provider"):
            with ThreadPoolExecutor(max_workers=2) as executor:
                futures = [executor.submit(holder), executor.submit(waiter)]
                wait(futures)

        for future in futures:
            future.result()
        assert "Waiting for lock on order:busy" in caplog.text

    def test_same_resource_serializes_access(self) -> None:
        provider = InMemoryLockProvider()
        inside = 0
        max_inside = 0
        counter_lock = threading.Lock()

        def worker() -> None:
            nonlocal inside, max_inside
            with provider.acquire("member:shared"):
                with counter_lock:
                    inside += 1
                    max_inside = max(max_inside, inside)
                time.sleep(0.01)
                with counter_lock:
                    inside -= 1

        with ThreadPoolExecutor(max_workers=5) as executor:
            wait([executor.submit(worker) for _ in range(5)])

        assert max_inside == 1

    def test_different_resources_run_in_parallel(self) -> None:
        provider = InMemoryLockProvider()
        barrier = threading.Barrier(2, timeout=2)

        def worker(resource_id: str) -> None:
            with provider.acquire(resource_id):
                barrier.wait()

        with ThreadPoolExecutor(max_workers=2) as executor:
            futures = [executor.submit(worker, f"order:{i}") for i in range(2)]
            wait(futures)

        for future in futures:
            future.result()


# =============================================================================
# NoOpLockProvider Tests
# =============================================================================


class TestNoOpLockProvider:
    def test_implements_lock_provider_interface(self) -> None:
        assert isinstance(NoOpLockProvider(), LockProvider)

    def test_nested_acquire_of_same_resource_does_not_block(self) -> None:
        provider = NoOpLockProvider()

        with provider.acquire("order:1"), provider.acquire("order:1"):
            pass


class TestResourceKey:
    def test_formats_kind_and_identifier(self) -> None:
        order_id = OrderId.generate()

        assert resource_key("order", order_id) == f"order:{order_id.value}"
