"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Iterator
from typing import Protocol, TypeVar

from roster.domain import Record

R = TypeVar("R", bound=Record)


class RecordStore(Protocol[R]):
    """Holds records keyed by id. Performs no checks of its own."""

    def put(self, record: R) -> None:
        """Store a record under its id, replacing any record with that id."""
        ...

    def get(self, record_id: str) -> R | None:
        """Return the record with the given id, or None."""
        ...

    def remove(self, record_id: str) -> R | None:
        """Remove and return the record with the given id, or None if absent."""
        ...

    def __contains__(self, record_id: object) -> bool:
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[str]:
        """Iterate over stored ids."""
        ...
