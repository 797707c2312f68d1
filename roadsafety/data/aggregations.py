"""
Aggregations over district statistics used by the overview and detail pages.

Core functions return plain dataclasses. The `*_frame` helpers reshape them
into pandas DataFrames for charts and tables.
"""

from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass, fields
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from roadsafety.config import SHORT_LABELS
from roadsafety.data.models import DailyStats, District


@dataclass(frozen=True)
class Totals:
    staff: int = 0  # average daily headcount, not a cumulative count
    service: int = 0
    restroom: int = 0
    assistance: int = 0
    accident: int = 0
    fatality: int = 0
    accident_prev_year: int = 0
    fatality_prev_year: int = 0

    def __add__(self, other: "Totals") -> "Totals":
        if not isinstance(other, Totals):
            return NotImplemented
        return Totals(**{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)})


@dataclass(frozen=True)
class TrendPoint:
    date: dt.date
    service: int = 0
    accident: int = 0
    fatality: int = 0


@dataclass(frozen=True)
class DailyComparison:
    today: Optional[dt.date]
    yesterday: Optional[dt.date]
    accident_today: int
    accident_yesterday: int
    fatality_today: int
    fatality_yesterday: int

    @property
    def accident_change_pct(self) -> float:
        return percent_change(self.accident_today, self.accident_yesterday)

    @property
    def fatality_change_pct(self) -> float:
        return percent_change(self.fatality_today, self.fatality_yesterday)


@dataclass(frozen=True)
class YearComparison:
    accident: int
    accident_prev_year: int
    fatality: int
    fatality_prev_year: int

    @property
    def accident_change_pct(self) -> float:
        return percent_change(self.accident, self.accident_prev_year)

    @property
    def fatality_change_pct(self) -> float:
        return percent_change(self.fatality, self.fatality_prev_year)


def percent_change(current: float, previous: float) -> float:
    """Percentage change from `previous` to `current`.

    Returns 0.0 when `previous` is 0; the dashboard shows that as no change.
    """
    if previous == 0:
        return 0.0
    return (current - previous) / previous * 100


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def average_staff(stats: Sequence[DailyStats]) -> int:
    total = sum(s.staff_count for s in stats)
    return round_half_up(total / (len(stats) or 1))


def stats_totals(stats: Sequence[DailyStats]) -> Totals:
    return Totals(
        staff=average_staff(stats),
        service=sum(s.service_users for s in stats),
        restroom=sum(s.restroom_users for s in stats),
        assistance=sum(s.assistance_count for s in stats),
        accident=sum(s.accident_count for s in stats),
        fatality=sum(s.fatality_count for s in stats),
        accident_prev_year=sum(s.accident_count_prev_year for s in stats),
        fatality_prev_year=sum(s.fatality_count_prev_year for s in stats),
    )


def district_totals(district: District) -> Totals:
    return stats_totals(district.stats)


def grand_totals(districts: Iterable[District]) -> Totals:
    return sum((district_totals(d) for d in districts), Totals())


def daily_trend(districts: Iterable[District]) -> List[TrendPoint]:
    by_date: Dict[dt.date, Tuple[int, int, int]] = {}
    for district in districts:
        for stat in district.stats:
            service, accident, fatality = by_date.get(stat.date, (0, 0, 0))
            by_date[stat.date] = (
                service + stat.service_users,
                accident + stat.accident_count,
                fatality + stat.fatality_count,
            )
    return [
        TrendPoint(date=date, service=service, accident=accident, fatality=fatality)
        for date, (service, accident, fatality) in sorted(by_date.items())
    ]


def latest_dates(
    districts: Iterable[District],
    as_of: Optional[dt.date] = None,
) -> Tuple[Optional[dt.date], Optional[dt.date]]:
    """The two most recent distinct dates present in the data.

    With `as_of`, rows dated after it are ignored so "today" can be pinned to
    a clock instead of whatever the source last supplied.
    """
    dates = sorted({s.date for d in districts for s in d.stats if as_of is None or s.date <= as_of})
    if not dates:
        return None, None
    return dates[-1], dates[-2] if len(dates) > 1 else None


def day_over_day(trend: Sequence[TrendPoint]) -> DailyComparison:
    today = trend[-1] if trend else None
    yesterday = trend[-2] if len(trend) > 1 else None
    return DailyComparison(
        today=today.date if today else None,
        yesterday=yesterday.date if yesterday else None,
        accident_today=today.accident if today else 0,
        accident_yesterday=yesterday.accident if yesterday else 0,
        fatality_today=today.fatality if today else 0,
        fatality_yesterday=yesterday.fatality if yesterday else 0,
    )


def year_over_year(totals: Totals) -> YearComparison:
    return YearComparison(
        accident=totals.accident,
        accident_prev_year=totals.accident_prev_year,
        fatality=totals.fatality,
        fatality_prev_year=totals.fatality_prev_year,
    )


def short_label(name: str) -> str:
    return SHORT_LABELS.get(name, name.replace("แขวงทางหลวง", "").strip() or name)


# --- DataFrame builders for pages ---

TOTAL_COLUMNS = ["staff", "service", "restroom", "assistance", "accident", "fatality"]


def summary_frame(districts: Sequence[District]) -> pd.DataFrame:
    """One row per district plus a trailing grand-total row."""
    rows = []
    for district in districts:
        totals = district_totals(district)
        rows.append({"district_id": district.id, "district": district.name,
                     **{c: getattr(totals, c) for c in TOTAL_COLUMNS}})
    grand = grand_totals(districts)
    rows.append({"district_id": None, "district": "รวมทั้งหมด", **{c: getattr(grand, c) for c in TOTAL_COLUMNS}})
    return pd.DataFrame(rows, columns=["district_id", "district", *TOTAL_COLUMNS])


def district_chart_frame(
    districts: Sequence[District],
    today: Optional[dt.date],
    yesterday: Optional[dt.date],
) -> pd.DataFrame:
    rows = []
    for district in districts:
        totals = district_totals(district)
        today_stat = district.stat_for(today) if today else None
        yesterday_stat = district.stat_for(yesterday) if yesterday else None
        rows.append(
            {
                "label": short_label(district.name),
                **{c: getattr(totals, c) for c in TOTAL_COLUMNS},
                "accident_prev_year": totals.accident_prev_year,
                "fatality_prev_year": totals.fatality_prev_year,
                "accident_today": today_stat.accident_count if today_stat else 0,
                "accident_yesterday": yesterday_stat.accident_count if yesterday_stat else 0,
                "fatality_today": today_stat.fatality_count if today_stat else 0,
                "fatality_yesterday": yesterday_stat.fatality_count if yesterday_stat else 0,
            }
        )
    return pd.DataFrame(rows)


def trend_frame(trend: Sequence[TrendPoint]) -> pd.DataFrame:
    frame = pd.DataFrame(
        [{"date": p.date, "service": p.service, "accident": p.accident, "fatality": p.fatality} for p in trend],
        columns=["date", "service", "accident", "fatality"],
    )
    frame["date"] = pd.to_datetime(frame["date"])
    return frame


def daily_frame(stats: Sequence[DailyStats]) -> pd.DataFrame:
    """Detail-view rows in date order, without the prior-year counters."""
    columns = ["date", "staff_count", "service_users", "restroom_users",
               "assistance_count", "accident_count", "fatality_count"]
    return pd.DataFrame([{c: getattr(s, c) for c in columns} for s in stats], columns=columns)
