"""Thread-safe façade over a registry."""

import functools
import threading
from typing import Any, Generic

from roster.application.ports import R
from roster.application.registry import Registry


class SynchronizedRegistry(Generic[R]):
    """Serializes every call on the wrapped registry behind one re-entrant lock.

    Holding the lock for the whole call makes "check the id, then mutate"
    atomic, so two threads cannot both add the same id. Domain methods such as
    ``add_task`` are wrapped as well.
    """

    def __init__(self, registry: Registry[R]) -> None:
        self._registry = registry
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def add(self, record: R | None) -> None:
        with self._lock:
            self._registry.add(record)

    def delete(self, record_id: str | None) -> bool:
        with self._lock:
            return self._registry.delete(record_id)

    def update(self, record_id: str | None, **changes: Any) -> None:
        with self._lock:
            self._registry.update(record_id, **changes)

    def get(self, record_id: str | None) -> R | None:
        with self._lock:
            return self._registry.get(record_id)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._registry

    def __len__(self) -> int:
        with self._lock:
            return len(self._registry)

    def __getattr__(self, name: str) -> Any:
        attr = getattr(self._registry, name)
        if not callable(attr):
            return attr

        @functools.wraps(attr)
        def locked(*args: Any, **kwargs: Any) -> Any:
            with self._lock:
                return attr(*args, **kwargs)

        return locked
