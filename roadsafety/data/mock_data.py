from __future__ import annotations

import datetime as dt
import random
from typing import List, Optional, Sequence

from roadsafety.config import DISTRICT_NAMES, REPORT_DAYS, REPORT_START_DATE
from roadsafety.data.models import DailyStats, District, district_id


# Inclusive (low, high) bounds per counter
MOCK_RANGES = {
    "staff_count": (100, 149),
    "service_users": (50, 249),
    "restroom_users": (100, 399),
    "assistance_count": (0, 19),
    "accident_count": (0, 4),
    "fatality_count": (0, 1),
    "accident_count_prev_year": (0, 4),
    "fatality_count_prev_year": (0, 1),
}


def generate_daily_stats(
    start_date: dt.date,
    days: int,
    rng: Optional[random.Random] = None,
) -> List[DailyStats]:
    if days < 0:
        raise ValueError("days must be >= 0")
    rng = rng or random.Random()
    stats = []
    for i in range(days):
        values = {name: rng.randint(low, high) for name, (low, high) in MOCK_RANGES.items()}
        stats.append(DailyStats(date=start_date + dt.timedelta(days=i), **values))
    return stats


def generate_mock_districts(
    start_date: dt.date = REPORT_START_DATE,
    days: int = REPORT_DAYS,
    rng: Optional[random.Random] = None,
    district_names: Sequence[str] = DISTRICT_NAMES,
) -> List[District]:
    rng = rng or random.Random()
    return [
        District(
            id=district_id(index),
            name=name,
            stats=tuple(generate_daily_stats(start_date, days, rng)),
        )
        for index, name in enumerate(district_names)
    ]
