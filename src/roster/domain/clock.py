"""Time sources for rules that compare against the current moment."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Provides the current moment as an aware datetime."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall-clock time, read on every call."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass(frozen=True)
class FixedClock:
    """Always returns the same instant. Naive instants are taken as local time."""

    instant: datetime

    def now(self) -> datetime:
        return as_aware(self.instant)


def as_aware(value: datetime) -> datetime:
    """Return value with a tzinfo; naive values are interpreted as local time."""
    if value.tzinfo is None:
        return value.astimezone()
    return value


SYSTEM_CLOCK = SystemClock()
