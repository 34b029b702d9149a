"""In-memory implementation of RecordStore (no DB)."""

from collections.abc import Iterator
from typing import Generic

from roster.application.ports import R


class InMemoryRecordStore(Generic[R]):
    """Stores records in a dict keyed by id. Order preserved by insertion."""

    def __init__(self) -> None:
        self._by_id: dict[str, R] = {}

    def put(self, record: R) -> None:
        self._by_id[record.id] = record

    def get(self, record_id: str) -> R | None:
        return self._by_id.get(record_id)

    def remove(self, record_id: str) -> R | None:
        return self._by_id.pop(record_id, None)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._by_id))
