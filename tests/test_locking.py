"""Tests for SynchronizedRegistry."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from roster.application import TaskService
from roster.domain import DuplicateIdError, Task
from roster.infrastructure import InMemoryRecordStore, SynchronizedRegistry


def _registry() -> SynchronizedRegistry[Task]:
    return SynchronizedRegistry(TaskService(InMemoryRecordStore()))


def test_forwards_core_operations() -> None:
    registry = _registry()
    registry.add(Task("1", "Name", "Desc"))
    registry.update("1", name="New")
    assert registry.get("1").name == "New"
    assert "1" in registry
    assert len(registry) == 1
    assert registry.delete("1") is True
    assert len(registry) == 0


def test_domain_methods_and_attributes_pass_through() -> None:
    registry = _registry()
    registry.add_task(Task("1", "Name", "Desc"))
    registry.update_task("1", description="Changed")
    assert registry.get_task("1").description == "Changed"
    assert registry.label == "Task"
    assert registry.ids() == ["1"]


def test_domain_methods_run_under_the_lock() -> None:
    service = TaskService(InMemoryRecordStore())
    registry = SynchronizedRegistry(service)
    seen = []
    original_get = service.get

    def probing_get(record_id):
        result = {}
        other = threading.Thread(
            target=lambda: result.update(acquired=registry.lock.acquire(blocking=False))
        )
        other.start()
        other.join()
        seen.append(result["acquired"])
        return original_get(record_id)

    service.get = probing_get
    registry.get_task("1")
    assert seen == [False]


def test_concurrent_adds_of_same_id_admit_exactly_one() -> None:
    registry = _registry()
    barrier = threading.Barrier(8)

    def attempt(i: int) -> bool:
        barrier.wait()
        try:
            registry.add(Task("same", f"Worker {i}", "Desc"))
        except DuplicateIdError:
            return False
        return True

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(8)))

    assert results.count(True) == 1
    assert len(registry) == 1


def test_errors_propagate_and_release_lock() -> None:
    registry = _registry()
    registry.add(Task("1", "Name", "Desc"))
    with pytest.raises(DuplicateIdError):
        registry.add(Task("1", "Name", "Desc"))
    assert registry.lock.acquire(blocking=False)
    registry.lock.release()
