"""Quick check of which data source the dashboard would use.

Run with `python scripts/check_data_source.py` after setting the Google
Sheets variables (or a `.env`) to see whether the live sheet is reachable
and how many rows each district tab yields.
"""

from __future__ import annotations

from roadsafety.config import get_log_level
from roadsafety.data.aggregations import district_totals, latest_dates
from roadsafety.data.source import select_source
from roadsafety.logging_config import configure_logging


def main() -> None:
    configure_logging(get_log_level())
    selection = select_source()
    print(f"Source: {selection.source}")
    for district in selection.districts:
        totals = district_totals(district)
        print(
            f"  {district.id:<11} {district.name}: {len(district.stats)} days, "
            f"accidents={totals.accident}, fatalities={totals.fatality}"
        )
    today, yesterday = latest_dates(selection.districts)
    print(f"Latest dates: today={today}, yesterday={yesterday}")
    if selection.is_mock:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
