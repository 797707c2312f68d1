from __future__ import annotations

from dataclasses import dataclass
from typing import List

from roadsafety.data.models import District


@dataclass
class PageContext:
    districts: List[District]
    is_mock: bool
