"""
Utility helpers for formatting counts, percentages, and Thai-locale dates.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional, Union

THAI_MONTHS = [
    "มกราคม",
    "กุมภาพันธ์",
    "มีนาคม",
    "เมษายน",
    "พฤษภาคม",
    "มิถุนายน",
    "กรกฎาคม",
    "สิงหาคม",
    "กันยายน",
    "ตุลาคม",
    "พฤศจิกายน",
    "ธันวาคม",
]
BUDDHIST_ERA_OFFSET = 543


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def format_percent(value: Optional[float], decimals: int = 1) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:.{decimals}f}%"
    except (TypeError, ValueError):
        return "–"


def format_signed_percent(value: Optional[float], decimals: int = 1) -> str:
    """Percent with an explicit sign, e.g. "+12.5%" / "-3.0%" / "0.0%"."""
    if value is None:
        return "–"
    sign = "+" if value > 0 else ""
    return f"{sign}{format_percent(value, decimals)}"


def format_thai_date(value: Optional[Union[dt.date, str]], with_year: bool = False) -> str:
    """Render a date as "29 ธันวาคม" or, with year, "29 ธันวาคม 2568" (B.E.)."""
    if value is None:
        return ""
    if isinstance(value, str):
        try:
            value = dt.date.fromisoformat(value[:10])
        except ValueError:
            return value
    if isinstance(value, dt.datetime):
        value = value.date()
    label = f"{value.day} {THAI_MONTHS[value.month - 1]}"
    if with_year:
        label = f"{label} {value.year + BUDDHIST_ERA_OFFSET}"
    return label
