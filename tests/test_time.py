# tests/test_time.py

from datetime import date, datetime, timedelta, timezone

import pytest
from sunmoon.core.errors import InvalidArgumentError
from sunmoon.core.time import Instant, InstantKind, classify, day_start_utc, to_utc, utc_date

CEST = timezone(timedelta(hours=2))


def test_classify():
    assert classify(datetime(2025, 1, 1)) is InstantKind.UNSPECIFIED
    assert classify(datetime(2025, 1, 1, tzinfo=timezone.utc)) is InstantKind.UTC
    assert classify(datetime(2025, 1, 1, tzinfo=CEST)) is InstantKind.LOCAL


def test_naive_is_taken_as_utc():
    t = to_utc(datetime(2025, 6, 21, 12, 0))
    assert t == datetime(2025, 6, 21, 12, 0, tzinfo=timezone.utc)
    assert t.utcoffset() == timedelta(0)


def test_local_is_converted():
    t = to_utc(datetime(2025, 6, 21, 14, 0, tzinfo=CEST))
    assert t == datetime(2025, 6, 21, 12, 0, tzinfo=timezone.utc)
    assert t.tzinfo is timezone.utc


def test_tagged_instants():
    assert to_utc(Instant.utc(2000, 1, 1, 12)) == datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
    assert to_utc(Instant(InstantKind.UNSPECIFIED, datetime(2000, 1, 1))) == datetime(2000, 1, 1, tzinfo=timezone.utc)
    assert Instant.of(datetime(2000, 1, 1, tzinfo=CEST)).kind is InstantKind.LOCAL


def test_local_instant_without_offset_is_rejected():
    with pytest.raises(InvalidArgumentError):
        to_utc(Instant(InstantKind.LOCAL, datetime(2025, 1, 1, 8, 0)))


def test_utc_date():
    assert utc_date(date(2025, 3, 1)) == date(2025, 3, 1)
    # 23:30 at UTC-2 is already the next day in UTC
    late = datetime(2025, 1, 1, 23, 30, tzinfo=timezone(timedelta(hours=-2)))
    assert utc_date(late) == date(2025, 1, 2)
    assert utc_date(Instant.utc(2025, 1, 1, 5)) == date(2025, 1, 1)


def test_day_start_utc():
    assert day_start_utc(date(2024, 2, 29)) == datetime(2024, 2, 29, tzinfo=timezone.utc)
