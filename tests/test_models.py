import datetime as dt

import pytest

from roadsafety.data.models import COUNTER_FIELDS, DailyStats, District, district_id


def test_district_id_is_one_based():
    assert district_id(0) == "district-1"
    assert district_id(6) == "district-7"


def test_district_id_rejects_negative_position():
    with pytest.raises(ValueError):
        district_id(-1)


def test_daily_stats_defaults_to_zero_counters():
    stat = DailyStats(date=dt.date(2025, 12, 29))
    assert all(getattr(stat, name) == 0 for name in COUNTER_FIELDS)


def test_daily_stats_rejects_negative_counter():
    with pytest.raises(ValueError, match="accident_count"):
        DailyStats(date=dt.date(2025, 12, 29), accident_count=-1)


def test_records_are_read_only():
    stat = DailyStats(date=dt.date(2025, 12, 29), staff_count=120)
    district = District(id="district-1", name="A", stats=(stat,))
    with pytest.raises(AttributeError):
        stat.staff_count = 1  # type: ignore[misc]
    with pytest.raises(AttributeError):
        district.stats = ()  # type: ignore[misc]


def test_stat_for_finds_matching_date():
    first = DailyStats(date=dt.date(2025, 12, 29), accident_count=1)
    second = DailyStats(date=dt.date(2025, 12, 30), accident_count=2)
    district = District(id="district-1", name="A", stats=(first, second))
    assert district.stat_for(dt.date(2025, 12, 30)) is second
    assert district.stat_for(dt.date(2026, 1, 1)) is None
    assert district.dates == (dt.date(2025, 12, 29), dt.date(2025, 12, 30))
