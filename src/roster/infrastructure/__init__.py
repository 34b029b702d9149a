"""Infrastructure layer: concrete implementations of application ports."""

from roster.infrastructure.locking import SynchronizedRegistry
from roster.infrastructure.memory_repository import InMemoryRecordStore
from roster.infrastructure.phone import to_contact_phone

__all__ = [
    "InMemoryRecordStore",
    "SynchronizedRegistry",
    "to_contact_phone",
]
