from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from roadsafety.config import SheetsSettings, load_sheets_settings
from roadsafety.data.mock_data import generate_mock_districts
from roadsafety.data.models import District
from roadsafety.data.sheets import fetch_sheet_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceSelection:
    districts: List[District]
    is_mock: bool

    @property
    def source(self) -> str:
        return "mock" if self.is_mock else "google_sheets"


def select_source(settings: Optional[SheetsSettings] = None) -> SourceSelection:
    """Live sheet data when available, otherwise freshly generated mock data."""
    if settings is None:
        settings = load_sheets_settings()
    sheet_data = fetch_sheet_data(settings)
    if sheet_data is not None:
        return SourceSelection(districts=sheet_data, is_mock=False)
    logger.info("Serving mock district data")
    return SourceSelection(districts=generate_mock_districts(), is_mock=True)


def find_district(districts: Sequence[District], district_id: str) -> Optional[District]:
    return next((d for d in districts if d.id == district_id), None)
