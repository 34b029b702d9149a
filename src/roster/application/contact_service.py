"""Contact registry. Deletes are lenient by default: unknown ids are a no-op."""

from roster.application.ports import RecordStore
from roster.application.registry import DeletePolicy, Registry
from roster.domain import Contact


class ContactService(Registry[Contact]):
    """Address book keyed by contact id, with one update method per field."""

    def __init__(
        self,
        store: RecordStore[Contact],
        *,
        policy: DeletePolicy = DeletePolicy.LENIENT,
    ) -> None:
        super().__init__(Contact, store, policy=policy)

    def add_contact(self, contact: Contact | None) -> None:
        self.add(contact)

    def delete_contact(self, contact_id: str | None) -> bool:
        return self.delete(contact_id)

    def get_contact(self, contact_id: str | None) -> Contact | None:
        return self.get(contact_id)

    def update_first_name(self, contact_id: str | None, first_name: str) -> None:
        self.update(contact_id, first_name=first_name)

    def update_last_name(self, contact_id: str | None, last_name: str) -> None:
        self.update(contact_id, last_name=last_name)

    def update_phone(self, contact_id: str | None, phone: str) -> None:
        self.update(contact_id, phone=phone)

    def update_address(self, contact_id: str | None, address: str) -> None:
        self.update(contact_id, address=address)
