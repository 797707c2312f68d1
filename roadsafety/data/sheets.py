"""
Google Sheets source: one worksheet tab per district.

`fetch_sheet_data` never raises. It returns None when credentials are not
configured or when anything goes wrong talking to Google, and the caller
falls back to mock data.
"""

from __future__ import annotations

import datetime as dt
import logging
import math
import re
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Mapping, Optional, Sequence

import gspread
from google.oauth2.service_account import Credentials

from roadsafety.config import DISTRICT_NAMES, SHEET_TABS, SheetsSettings
from roadsafety.data.models import DailyStats, District, district_id

logger = logging.getLogger(__name__)

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets.readonly",
    "https://www.googleapis.com/auth/drive.readonly",
]
TOKEN_URI = "https://oauth2.googleapis.com/token"

DATE_COLUMN = "Date"
# Sheet header -> DailyStats field
COLUMN_MAP: Dict[str, str] = {
    "Staff": "staff_count",
    "ServiceUsers": "service_users",
    "Restroom": "restroom_users",
    "Assistance": "assistance_count",
    "Accidents": "accident_count",
    "Fatalities": "fatality_count",
    "Accidents2568": "accident_count_prev_year",
    "Fatalities2568": "fatality_count_prev_year",
}

BUDDHIST_ERA_OFFSET = 543
_SLASH_DATE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_LEADING_NUMBER = re.compile(r"^[+-]?\d+(?:\.\d*)?(?:[eE][+-]?\d+)?")


def parse_count(value: Any) -> int:
    """Parse a sheet cell into a non-negative int; anything unusable is 0.

    Accepts ints, floats (truncated), and strings with thousands separators,
    an exponent ("1e3", as gspread numericises it) or trailing text ("12 คน").
    Infinite and NaN values are 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        number = value
    else:
        text = str(value).strip().replace(",", "")
        match = _LEADING_NUMBER.match(text)
        if not match:
            return 0
        number = float(match.group(0))
    if not math.isfinite(number):
        return 0
    return max(int(number), 0)


def parse_sheet_date(value: Any) -> Optional[dt.date]:
    """Parse ISO (2026-01-01), D/M/YYYY, or Buddhist-era D/M/25xx dates."""
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return dt.date.fromisoformat(text[:10])
    except ValueError:
        pass
    match = _SLASH_DATE.match(text)
    if not match:
        return None
    day, month, year = (int(part) for part in match.groups())
    if year > 2400:
        year -= BUDDHIST_ERA_OFFSET
    try:
        return dt.date(year, month, day)
    except ValueError:
        return None


def rows_to_stats(rows: Sequence[Mapping[str, Any]], sheet_title: str = "") -> List[DailyStats]:
    """Map worksheet records to DailyStats sorted by date.

    Rows without a date are skipped. A repeated date keeps the later row.
    """
    by_date: Dict[dt.date, DailyStats] = {}
    for row_number, row in enumerate(rows, start=2):
        raw_date = row.get(DATE_COLUMN)
        if raw_date is None or not str(raw_date).strip():
            continue
        date = parse_sheet_date(raw_date)
        if date is None:
            logger.warning("Sheet %r row %d: unrecognised date %r, row skipped", sheet_title, row_number, raw_date)
            continue
        if date in by_date:
            logger.warning("Sheet %r row %d: duplicate date %s, keeping the later row", sheet_title, row_number, date)
        counts = {field: parse_count(row.get(column)) for column, field in COLUMN_MAP.items()}
        by_date[date] = DailyStats(date=date, **counts)
    return sorted(by_date.values(), key=lambda s: s.date)


def _authorize(settings: SheetsSettings) -> gspread.Client:
    info = {
        "type": "service_account",
        "client_email": settings.service_account_email,
        "private_key": settings.private_key,
        "token_uri": TOKEN_URI,
    }
    credentials = Credentials.from_service_account_info(info, scopes=SCOPES)
    return gspread.authorize(credentials)


def _load_district(
    position: int,
    name: str,
    worksheets: Mapping[str, Any],
    sheet_tabs: Mapping[str, str],
) -> District:
    did = district_id(position)
    sheet_title = sheet_tabs.get(name)
    if not sheet_title:
        logger.info("No sheet tab mapped for %s", name)
        return District(id=did, name=name)
    worksheet = worksheets.get(sheet_title)
    if worksheet is None:
        logger.warning('Sheet with title "%s" not found.', sheet_title)
        return District(id=did, name=name)
    records = worksheet.get_all_records()
    return District(id=did, name=name, stats=tuple(rows_to_stats(records, sheet_title)))


def fetch_sheet_data(
    settings: SheetsSettings,
    district_names: Sequence[str] = DISTRICT_NAMES,
    sheet_tabs: Mapping[str, str] = SHEET_TABS,
) -> Optional[List[District]]:
    if not settings.is_complete:
        logger.warning(
            "Google Sheets credentials not found (%s). Using mock data.",
            ", ".join(settings.missing()),
        )
        return None

    try:
        client = _authorize(settings)
        spreadsheet = client.open_by_key(settings.spreadsheet_id)
        worksheets = {ws.title: ws for ws in spreadsheet.worksheets()}

        # One tab read per district, joined before returning
        with ThreadPoolExecutor(max_workers=max(len(district_names), 1)) as pool:
            futures = [
                pool.submit(_load_district, position, name, worksheets, sheet_tabs)
                for position, name in enumerate(district_names)
            ]
            districts = [f.result() for f in futures]
    except Exception:
        logger.exception("Error fetching from Google Sheets")
        return None

    logger.info(
        "Loaded %d rows from Google Sheets across %d districts",
        sum(len(d.stats) for d in districts),
        len(districts),
    )
    return districts
