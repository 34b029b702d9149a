"""Domain layer: records, field rules and errors. No dependencies on outer layers."""

from roster.domain.clock import SYSTEM_CLOCK, Clock, FixedClock, SystemClock
from roster.domain.entities import Appointment, Contact, Task
from roster.domain.errors import (
    ConfigurationError,
    DuplicateIdError,
    InvalidIdError,
    NotFoundError,
    NullRecordError,
    RegistryError,
    RosterError,
    ValidationError,
)
from roster.domain.record import IdentifierField, Record, RecordField

__all__ = [
    "Appointment",
    "Clock",
    "ConfigurationError",
    "Contact",
    "DuplicateIdError",
    "FixedClock",
    "IdentifierField",
    "InvalidIdError",
    "NotFoundError",
    "NullRecordError",
    "Record",
    "RecordField",
    "RegistryError",
    "RosterError",
    "SYSTEM_CLOCK",
    "SystemClock",
    "Task",
    "ValidationError",
]
