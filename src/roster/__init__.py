"""
Roster core: clean-architecture layout.

- domain: records (Appointment, Contact, Task), field rules, errors. No outer dependencies.
- application: the generic Registry and one service per domain, ports (RecordStore).
- infrastructure: adapters (InMemoryRecordStore, SynchronizedRegistry, phone input).
"""

from roster.application import (
    AppointmentService,
    ContactService,
    DeletePolicy,
    RecordStore,
    Registry,
    TaskService,
)
from roster.domain import (
    Appointment,
    Clock,
    Contact,
    DuplicateIdError,
    FixedClock,
    InvalidIdError,
    NotFoundError,
    NullRecordError,
    Record,
    RegistryError,
    RosterError,
    SystemClock,
    Task,
    ValidationError,
)
from roster.infrastructure import InMemoryRecordStore, SynchronizedRegistry

__all__ = [
    "Appointment",
    "AppointmentService",
    "Clock",
    "Contact",
    "ContactService",
    "DeletePolicy",
    "DuplicateIdError",
    "FixedClock",
    "InMemoryRecordStore",
    "InvalidIdError",
    "NotFoundError",
    "NullRecordError",
    "Record",
    "RecordStore",
    "Registry",
    "RegistryError",
    "RosterError",
    "SynchronizedRegistry",
    "SystemClock",
    "Task",
    "TaskService",
    "ValidationError",
]
