"""Application layer: registries and ports. Depends only on domain."""

from roster.application.appointment_service import AppointmentService
from roster.application.contact_service import ContactService
from roster.application.ports import RecordStore
from roster.application.registry import DeletePolicy, Registry
from roster.application.task_service import TaskService

__all__ = [
    "AppointmentService",
    "ContactService",
    "DeletePolicy",
    "RecordStore",
    "Registry",
    "TaskService",
]
