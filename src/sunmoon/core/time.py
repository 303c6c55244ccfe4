"""
sunmoon.core.time
-----------------
Tagged instants and the one place where input times are brought to UTC.

Callers may pass a timezone-aware datetime in any zone, a naive datetime, or an
explicit ``Instant``. A naive value carries no zone information and is taken to
be UTC already; it is never interpreted in the machine's local zone.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import Union

from .errors import InvalidArgumentError


class InstantKind(Enum):
    UTC = "utc"
    LOCAL = "local"
    UNSPECIFIED = "unspecified"


def classify(dt: datetime) -> InstantKind:
    if dt.tzinfo is None or dt.utcoffset() is None:
        return InstantKind.UNSPECIFIED
    if dt.utcoffset() == timedelta(0):
        return InstantKind.UTC
    return InstantKind.LOCAL


@dataclass(frozen=True)
class Instant:
    kind: InstantKind
    value: datetime

    @classmethod
    def of(cls, dt: datetime) -> "Instant":
        return cls(kind=classify(dt), value=dt)

    @classmethod
    def utc(cls, *args: int) -> "Instant":
        """Instant.utc(2000, 1, 1, 12) -> a UTC-tagged instant."""
        return cls(kind=InstantKind.UTC, value=datetime(*args, tzinfo=timezone.utc))


TimeLike = Union[datetime, Instant]
DateLike = Union[date, datetime, Instant]


def to_utc(t: TimeLike) -> datetime:
    """Normalize any accepted instant to an aware UTC datetime."""
    inst = t if isinstance(t, Instant) else Instant.of(t)
    dt = inst.value
    if dt.tzinfo is None:
        if inst.kind is InstantKind.LOCAL:
            raise InvalidArgumentError("a LOCAL instant needs a UTC offset")
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_date(d: DateLike) -> date:
    """Calendar date (UTC) a rise/set query refers to.

    A plain ``date`` is taken as-is; instants are first brought to UTC.
    """
    if isinstance(d, (datetime, Instant)):
        return to_utc(d).date()
    return d


def day_start_utc(d: date) -> datetime:
    """00:00 UTC on the given calendar date."""
    return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
