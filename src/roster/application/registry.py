"""Generic registry: uniqueness and existence checks around a record store.

Field content is never checked here; updates go through the record's own
setters, which raise ``ValidationError`` on bad input.
"""

import logging
from enum import Enum
from typing import Any, Generic

from roster.application.ports import R, RecordStore
from roster.domain import (
    DuplicateIdError,
    InvalidIdError,
    NotFoundError,
    NullRecordError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class DeletePolicy(str, Enum):
    """How delete() treats a null/blank or unknown id."""

    STRICT = "strict"  # raise InvalidIdError / NotFoundError
    LENIENT = "lenient"  # report False, never raise


def _is_blank(record_id: Any) -> bool:
    return record_id is None or not isinstance(record_id, str) or not record_id.strip()


class Registry(Generic[R]):
    """In-memory, id-keyed collection of one record type.

    The registry assumes it is the only writer of ``store``. It is not
    thread-safe; wrap it in ``SynchronizedRegistry`` to share it.
    """

    def __init__(
        self,
        record_type: type[R],
        store: RecordStore[R],
        *,
        policy: DeletePolicy | str = DeletePolicy.STRICT,
    ) -> None:
        self._record_type = record_type
        self._store = store
        self._policy = DeletePolicy(policy)

    @property
    def label(self) -> str:
        return self._record_type.label

    @property
    def policy(self) -> DeletePolicy:
        return self._policy

    def add(self, record: R | None) -> None:
        """Insert a record. Its id must not be registered yet."""
        if record is None:
            raise NullRecordError(self.label)
        if not isinstance(record, self._record_type):
            raise TypeError(
                f"{type(self).__name__} stores {self._record_type.__name__}, "
                f"got {type(record).__name__}"
            )
        if record.id in self._store:
            raise DuplicateIdError(self.label, record.id)
        self._store.put(record)
        logger.debug("Added %s %s", self.label, record.id)

    def delete(self, record_id: str | None) -> bool:
        """Remove a record. Returns True if one was removed.

        Under ``DeletePolicy.STRICT`` a blank id raises ``InvalidIdError`` and
        an unknown id raises ``NotFoundError``; under ``LENIENT`` both return
        False.
        """
        if _is_blank(record_id):
            if self._policy is DeletePolicy.STRICT:
                raise InvalidIdError(self.label)
            return False
        removed = self._store.remove(record_id)
        if removed is None:
            if self._policy is DeletePolicy.STRICT:
                raise NotFoundError(self.label, record_id)
            return False
        logger.debug("Deleted %s %s", self.label, record_id)
        return True

    def update(self, record_id: str | None, **changes: Any) -> None:
        """Assign the given fields, in order, on an existing record.

        Each assignment commits on its own: if a later field fails validation,
        earlier ones in the same call stay applied.
        """
        record = self._require_existing(record_id)
        unknown = [name for name in changes if name not in record.field_names]
        if unknown:
            raise ValidationError(
                unknown[0], f"{self.label} has no updatable field '{unknown[0]}'"
            )
        for name, value in changes.items():
            record.set(name, value)
        if changes:
            logger.debug("Updated %s %s fields=%s", self.label, record_id, list(changes))

    def get(self, record_id: str | None) -> R | None:
        """Return the record with the given id, or None. Never raises."""
        if _is_blank(record_id):
            return None
        return self._store.get(record_id)

    def ids(self) -> list[str]:
        return list(self._store)

    def __contains__(self, record_id: object) -> bool:
        return not _is_blank(record_id) and record_id in self._store

    def __len__(self) -> int:
        return len(self._store)

    def _require_existing(self, record_id: str | None) -> R:
        if _is_blank(record_id):
            raise InvalidIdError(self.label)
        record = self._store.get(record_id)
        if record is None:
            raise NotFoundError(self.label, record_id)
        return record
