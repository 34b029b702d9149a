"""Domain entities: Appointment, Contact and Task."""

from roster.domain.record import IdentifierField, Record, RecordField
from roster.domain.rules import exact_digits, max_length, not_blank, not_empty, not_in_past

# Field limits shared by the registries and their callers.
DESCRIPTION_MAX_LENGTH = 50
TASK_NAME_MAX_LENGTH = 20
CONTACT_NAME_MAX_LENGTH = 10
CONTACT_ADDRESS_MAX_LENGTH = 30
PHONE_DIGITS = 10


class Appointment(Record):
    """
    A scheduled appointment.
    The date may be moved, but never to a moment before the record's clock.
    """

    label = "Appointment"
    id = IdentifierField("Appointment ID")
    date = RecordField("Appointment date", not_in_past)
    description = RecordField(
        "Description", not_blank, max_length(DESCRIPTION_MAX_LENGTH, trimmed=True)
    )


class Contact(Record):
    """
    A person in the address book.
    Names and address accept surrounding whitespace and are measured as given.
    """

    label = "Contact"
    id = IdentifierField("Contact ID")
    first_name = RecordField(
        "First name", not_empty, max_length(CONTACT_NAME_MAX_LENGTH)
    )
    last_name = RecordField("Last name", not_empty, max_length(CONTACT_NAME_MAX_LENGTH))
    phone = RecordField("Phone", exact_digits(PHONE_DIGITS))
    address = RecordField(
        "Address", not_empty, max_length(CONTACT_ADDRESS_MAX_LENGTH)
    )


class Task(Record):
    """A unit of work with a short name and a description."""

    label = "Task"
    id = IdentifierField("Task ID")
    name = RecordField("Name", not_blank, max_length(TASK_NAME_MAX_LENGTH, trimmed=True))
    description = RecordField(
        "Description", not_blank, max_length(DESCRIPTION_MAX_LENGTH, trimmed=True)
    )
