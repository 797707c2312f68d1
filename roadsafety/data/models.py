"""
Record types shared by the data sources, aggregators and pages.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, fields
from typing import Tuple


@dataclass(frozen=True)
class DailyStats:
    """One calendar day of operational counters for one district."""

    date: dt.date
    staff_count: int = 0
    service_users: int = 0
    restroom_users: int = 0
    assistance_count: int = 0
    accident_count: int = 0
    fatality_count: int = 0
    accident_count_prev_year: int = 0
    fatality_count_prev_year: int = 0

    def __post_init__(self) -> None:
        for name in COUNTER_FIELDS:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")


@dataclass(frozen=True)
class District:
    id: str
    name: str
    stats: Tuple[DailyStats, ...] = ()

    @property
    def dates(self) -> Tuple[dt.date, ...]:
        return tuple(s.date for s in self.stats)

    def stat_for(self, date: dt.date):
        return next((s for s in self.stats if s.date == date), None)


COUNTER_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(DailyStats) if f.name != "date")


def district_id(position: int) -> str:
    """Id for the district at a 0-based position of the ordered name table."""
    if position < 0:
        raise ValueError("position must be >= 0")
    return f"district-{position + 1}"
