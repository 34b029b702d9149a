"""Field rules.

A rule is a callable ``rule(label, value, clock)`` that returns an error
message when ``value`` violates it, or ``None`` when it passes. Rules are
evaluated in order and the first message wins, so later rules may assume the
earlier ones passed (``max_length`` after ``not_blank`` only sees strings).
"""

import re
from collections.abc import Callable
from datetime import datetime
from typing import Any

from roster.domain.clock import Clock

Rule = Callable[[str, Any, Clock], str | None]


def required(label: str, value: Any, clock: Clock) -> str | None:
    if value is None:
        return f"{label} cannot be null"
    return None


def not_blank(label: str, value: Any, clock: Clock) -> str | None:
    """Reject None, non-strings and strings that are empty once stripped."""
    if value is None:
        return f"{label} cannot be null or empty"
    if not isinstance(value, str):
        return f"{label} must be a string"
    if not value.strip():
        return f"{label} cannot be null or empty"
    return None


def not_empty(label: str, value: Any, clock: Clock) -> str | None:
    """Reject None, non-strings and the empty string. Whitespace is allowed."""
    if value is None:
        return f"{label} cannot be null or empty"
    if not isinstance(value, str):
        return f"{label} must be a string"
    if value == "":
        return f"{label} cannot be null or empty"
    return None


def max_length(limit: int, *, trimmed: bool = False) -> Rule:
    """Length cap, measured on the stripped value when trimmed is set."""

    def rule(label: str, value: Any, clock: Clock) -> str | None:
        measured = value.strip() if trimmed else value
        if len(measured) > limit:
            return f"{label} cannot exceed {limit} characters"
        return None

    return rule


def exact_digits(count: int) -> Rule:
    pattern = re.compile(rf"[0-9]{{{count}}}")

    def rule(label: str, value: Any, clock: Clock) -> str | None:
        if not isinstance(value, str) or pattern.fullmatch(value) is None:
            return f"{label} must be exactly {count} digits"
        return None

    return rule


def not_in_past(label: str, value: Any, clock: Clock) -> str | None:
    """Reject datetimes strictly earlier than clock.now() at call time."""
    if value is None:
        return f"{label} cannot be null"
    if not isinstance(value, datetime):
        return f"{label} must be a datetime"
    now = clock.now()
    if value.tzinfo is None:
        # Naive values are local wall time; the value itself is never converted.
        now = now.astimezone().replace(tzinfo=None)
    if value < now:
        return f"{label} cannot be in the past"
    return None


def identifier(limit: int) -> tuple[Rule, ...]:
    """Rules for a record id: non-blank, raw length at most limit."""
    return (not_blank, max_length(limit))
