"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import datetime as dt
import os
from dataclasses import dataclass
from typing import Dict, List, Optional

import streamlit as st


@dataclass(frozen=True)
class DistrictConfig:
    name: str
    sheet_title: str
    short_label: str


# Ordered district table. A district's id is `district-{position + 1}`, so
# appending is safe but reordering changes every id after the moved entry.
DISTRICTS: List[DistrictConfig] = [
    DistrictConfig("สำนักงานทางหลวงที่ 3", "สทล.3", "สทล.3"),
    DistrictConfig("แขวงทางหลวงสกลนครที่ 1", "ขท.สกล1", "สกลนครที่ 1"),
    DistrictConfig("แขวงทางหลวงสกลนครที่ 2", "ขท.สกล2", "สกลนครที่ 2"),
    DistrictConfig("แขวงทางหลวงนครพนม", "ขท.นครพนม", "นครพนม"),
    DistrictConfig("แขวงทางหลวงหนองคาย", "ขท.หนองคาย", "หนองคาย"),
    DistrictConfig("แขวงทางหลวงบึงกาฬ", "ขท.บึงกาฬ", "บึงกาฬ"),
    DistrictConfig("แขวงทางหลวงมุกดาหาร", "ขท.มุกดาหาร", "มุกดาหาร"),
]

DISTRICT_NAMES: List[str] = [d.name for d in DISTRICTS]
SHEET_TABS: Dict[str, str] = {d.name: d.sheet_title for d in DISTRICTS}
SHORT_LABELS: Dict[str, str] = {d.name: d.short_label for d in DISTRICTS}

# New Year festival 2569 reporting window (29 Dec 2568 - 4 Jan 2569 B.E.)
REPORT_START_DATE = dt.date(2025, 12, 29)
REPORT_DAYS = 7
REPORT_TITLE = "รายงานสรุปผลการปฏิบัติงาน"
REPORT_SUBTITLE = "เทศกาลปีใหม่ 2569 (29 ธ.ค. 68 - 4 ม.ค. 69)"

SHEET_ID_ENV = "GOOGLE_SHEET_ID"
SERVICE_ACCOUNT_EMAIL_ENV = "GOOGLE_SERVICE_ACCOUNT_EMAIL"
PRIVATE_KEY_ENV = "GOOGLE_PRIVATE_KEY"
LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class SheetsSettings:
    spreadsheet_id: Optional[str] = None
    service_account_email: Optional[str] = None
    private_key: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.spreadsheet_id and self.service_account_email and self.private_key)

    def missing(self) -> List[str]:
        names = []
        if not self.spreadsheet_id:
            names.append(SHEET_ID_ENV)
        if not self.service_account_email:
            names.append(SERVICE_ACCOUNT_EMAIL_ENV)
        if not self.private_key:
            names.append(PRIVATE_KEY_ENV)
        return names


def _get_secret(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val and val.strip():
        return val.strip()
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            if v is not None and str(v).strip():
                return str(v).strip()
            return default
    except Exception:
        # No secrets.toml outside the Streamlit runtime
        pass
    return default


def unescape_private_key(raw: Optional[str]) -> Optional[str]:
    """Turn literal `\\n` sequences (as stored in env files) into newlines."""
    if raw is None:
        return None
    return raw.replace("\\n", "\n")


def load_sheets_settings() -> SheetsSettings:
    """Resolve Google Sheets credentials from env / Streamlit secrets / .env."""
    from roadsafety.bootstrap_env import ensure_env

    ensure_env()
    return SheetsSettings(
        spreadsheet_id=_get_secret(SHEET_ID_ENV),
        service_account_email=_get_secret(SERVICE_ACCOUNT_EMAIL_ENV),
        private_key=unescape_private_key(_get_secret(PRIVATE_KEY_ENV)),
    )


def get_log_level() -> str:
    return (_get_secret(LOG_LEVEL_ENV, "INFO") or "INFO").upper()
