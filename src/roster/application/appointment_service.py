"""Appointment registry. Deletes are strict by default."""

from datetime import datetime

from roster.application.ports import RecordStore
from roster.application.registry import DeletePolicy, Registry
from roster.domain import Appointment


class AppointmentService(Registry[Appointment]):
    """Add, delete, update and look up appointments by id."""

    def __init__(
        self,
        store: RecordStore[Appointment],
        *,
        policy: DeletePolicy = DeletePolicy.STRICT,
    ) -> None:
        super().__init__(Appointment, store, policy=policy)

    def add_appointment(self, appointment: Appointment | None) -> None:
        self.add(appointment)

    def delete_appointment(self, appointment_id: str | None) -> bool:
        return self.delete(appointment_id)

    def get_appointment(self, appointment_id: str | None) -> Appointment | None:
        return self.get(appointment_id)

    def update_appointment(
        self,
        appointment_id: str | None,
        date: datetime | None = None,
        description: str | None = None,
    ) -> None:
        """Move and/or re-describe an appointment. None leaves a field unchanged."""
        changes = {"date": date, "description": description}
        self.update(
            appointment_id, **{name: value for name, value in changes.items() if value is not None}
        )
