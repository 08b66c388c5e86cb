from __future__ import annotations

from datetime import datetime

import pytest
import pytz

from canvas_data_sql.storage import (
    HASH_LENGTH,
    DailyHashGenerator,
    StaticHashGenerator,
    compute_daily_hash,
)


def _fixed_clock(value: datetime):
    def _clock(tz):
        return value.astimezone(tz)

    return _clock


def test_daily_hash_is_stable_within_a_day() -> None:
    morning = DailyHashGenerator(clock=_fixed_clock(datetime(2024, 3, 1, 16, 0, tzinfo=pytz.utc)))
    evening = DailyHashGenerator(clock=_fixed_clock(datetime(2024, 3, 2, 6, 0, tzinfo=pytz.utc)))

    # Both instants fall on 2024-03-01 in Los Angeles.
    assert morning.current_date_str() == "2024-03-01"
    assert morning.generate_hash() == evening.generate_hash()
    assert len(morning.generate_hash()) == HASH_LENGTH


def test_daily_hash_changes_across_days() -> None:
    assert compute_daily_hash("2024-03-01") != compute_daily_hash("2024-03-02")


def test_daily_hash_depends_on_salt() -> None:
    assert compute_daily_hash("2024-03-01", salt="a") != compute_daily_hash("2024-03-01", salt="b")


def test_compute_daily_hash_rejects_empty_date() -> None:
    with pytest.raises(ValueError):
        compute_daily_hash(" ")


def test_static_hash_generator() -> None:
    assert StaticHashGenerator(" abc123 ").generate_hash() == "abc123"
    with pytest.raises(ValueError):
        StaticHashGenerator("")
