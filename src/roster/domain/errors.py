"""Domain layer errors."""


class RosterError(Exception):
    """Base roster error."""

    pass


class ValidationError(RosterError, ValueError):
    """A field value violates one of its rules."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class ConfigurationError(RosterError):
    """Configuration error."""

    pass


class RegistryError(RosterError):
    """Base registry error."""

    pass


class DuplicateIdError(RegistryError):
    """Raised when adding a record whose id is already registered."""

    def __init__(self, label: str, record_id: str):
        self.record_id = record_id
        super().__init__(f"{label} ID already exists: {record_id}")


class NotFoundError(RegistryError):
    """Raised when a referenced record id is not registered."""

    def __init__(self, label: str, record_id: str):
        self.record_id = record_id
        super().__init__(f"{label} ID not found: {record_id}")


class InvalidIdError(RegistryError, ValueError):
    """Raised when an operation is given a null or blank id."""

    def __init__(self, label: str):
        super().__init__(f"{label} ID cannot be null or empty")


class NullRecordError(RegistryError, ValueError):
    """Raised when add() is called without a record."""

    def __init__(self, label: str):
        super().__init__(f"{label} cannot be null")
