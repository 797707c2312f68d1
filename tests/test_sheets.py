import datetime as dt

import pytest

from conftest import FakeClient, FakeSpreadsheet, FakeWorksheet
from roadsafety.config import DISTRICT_NAMES, SHEET_TABS, SheetsSettings
from roadsafety.data import sheets
from roadsafety.data.sheets import fetch_sheet_data, parse_count, parse_sheet_date, rows_to_stats


def _row(date, **overrides):
    row = {
        "Date": date,
        "Staff": 120,
        "ServiceUsers": 80,
        "Restroom": 150,
        "Assistance": 3,
        "Accidents": 1,
        "Fatalities": 0,
        "Accidents2568": 2,
        "Fatalities2568": 1,
    }
    row.update(overrides)
    return row


@pytest.fixture
def fake_client(monkeypatch):
    def install(worksheets):
        client = FakeClient(FakeSpreadsheet(worksheets))
        monkeypatch.setattr(sheets, "_authorize", lambda settings: client)
        return client

    return install


@pytest.mark.parametrize(
    "value, expected",
    [
        (12, 12),
        (12.9, 12),
        ("7", 7),
        (" 1,234 ", 1234),
        ("15 คน", 15),
        ("", 0),
        (None, 0),
        ("n/a", 0),
        ("-4", 0),
        (float("nan"), 0),
        (float("inf"), 0),
        (float("-inf"), 0),
        ("1e3", 1000),
        ("2.5E1 คน", 25),
        ("1e999", 0),
    ],
)
def test_parse_count(value, expected):
    assert parse_count(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2025-12-29", dt.date(2025, 12, 29)),
        ("29/12/2025", dt.date(2025, 12, 29)),
        ("4/1/2569", dt.date(2026, 1, 4)),
        (dt.date(2026, 1, 1), dt.date(2026, 1, 1)),
        ("", None),
        ("yesterday", None),
        ("31/02/2026", None),
    ],
)
def test_parse_sheet_date(value, expected):
    assert parse_sheet_date(value) == expected


def test_rows_to_stats_sorts_and_skips_rows_without_date():
    rows = [
        _row("2025-12-31", Accidents=3),
        _row("", Accidents=9),
        {"Staff": 100},
        _row("2025-12-29", Accidents=1),
    ]
    stats = rows_to_stats(rows)
    assert [s.date for s in stats] == [dt.date(2025, 12, 29), dt.date(2025, 12, 31)]
    assert [s.accident_count for s in stats] == [1, 3]


def test_rows_to_stats_maps_every_column():
    (stat,) = rows_to_stats([_row("2025-12-29")])
    assert stat.staff_count == 120
    assert stat.service_users == 80
    assert stat.restroom_users == 150
    assert stat.assistance_count == 3
    assert stat.accident_count == 1
    assert stat.fatality_count == 0
    assert stat.accident_count_prev_year == 2
    assert stat.fatality_count_prev_year == 1


def test_rows_to_stats_defaults_missing_numbers_to_zero():
    (stat,) = rows_to_stats([{"Date": "2025-12-29", "Staff": "abc"}])
    assert stat.staff_count == 0
    assert stat.accident_count_prev_year == 0


def test_rows_to_stats_keeps_last_duplicate_date():
    stats = rows_to_stats([_row("2025-12-29", Accidents=1), _row("2025-12-29", Accidents=4)])
    assert len(stats) == 1
    assert stats[0].accident_count == 4


def test_rows_to_stats_drops_unparseable_dates(caplog):
    stats = rows_to_stats([_row("not a date"), _row("2025-12-30")], sheet_title="ขท.สกล1")
    assert [s.date for s in stats] == [dt.date(2025, 12, 30)]
    assert "unrecognised date" in caplog.text


def test_missing_credentials_returns_none_without_network(monkeypatch, caplog):
    def fail(*args, **kwargs):
        pytest.fail("no network call expected without credentials")

    monkeypatch.setattr(sheets, "_authorize", fail)
    monkeypatch.setattr(sheets.gspread, "authorize", fail)

    result = fetch_sheet_data(SheetsSettings(spreadsheet_id="sheet-123"))

    assert result is None
    assert "GOOGLE_PRIVATE_KEY" in caplog.text


def test_fetch_maps_tabs_to_districts(settings, fake_client):
    first_tab = FakeWorksheet(SHEET_TABS[DISTRICT_NAMES[0]], [_row("2025-12-30"), _row("2025-12-29", Accidents=5)])
    client = fake_client([first_tab, FakeWorksheet("unrelated", [_row("2025-12-29")])])

    districts = fetch_sheet_data(settings)

    assert client.opened_keys == ["sheet-123"]
    assert [d.id for d in districts] == [f"district-{i}" for i in range(1, 8)]
    assert [d.name for d in districts] == DISTRICT_NAMES
    assert [s.date for s in districts[0].stats] == [dt.date(2025, 12, 29), dt.date(2025, 12, 30)]
    assert districts[0].stats[0].accident_count == 5
    # Remaining tabs are absent from the spreadsheet
    assert all(d.stats == () for d in districts[1:])
    assert first_tab.reads == 1


def test_unmapped_district_gets_empty_stats(settings, fake_client):
    names = ["Mapped", "Unmapped", "Also mapped"]
    tabs = {"Mapped": "T1", "Also mapped": "T3"}
    fake_client([FakeWorksheet("T1", [_row("2026-01-01")]), FakeWorksheet("T3", [_row("2026-01-02")])])

    districts = fetch_sheet_data(settings, district_names=names, sheet_tabs=tabs)

    assert [d.id for d in districts] == ["district-1", "district-2", "district-3"]
    assert districts[1].name == "Unmapped"
    assert districts[1].stats == ()
    assert [s.date for s in districts[0].stats] == [dt.date(2026, 1, 1)]
    assert [s.date for s in districts[2].stats] == [dt.date(2026, 1, 2)]


def test_upstream_failure_returns_none(settings, monkeypatch, caplog):
    def boom(settings):
        raise ConnectionError("sheets unreachable")

    monkeypatch.setattr(sheets, "_authorize", boom)

    assert fetch_sheet_data(settings) is None
    assert "Error fetching from Google Sheets" in caplog.text


def test_failure_reading_one_tab_returns_none(settings, fake_client):
    class BrokenWorksheet(FakeWorksheet):
        def get_all_records(self):
            raise RuntimeError("malformed header row")

    fake_client([BrokenWorksheet(SHEET_TABS[DISTRICT_NAMES[2]], [])])

    assert fetch_sheet_data(settings) is None


def test_infinite_cell_keeps_live_data(settings, fake_client):
    # gspread numericises "inf" and "1e999" cells to float("inf")
    tab = FakeWorksheet(SHEET_TABS[DISTRICT_NAMES[0]], [_row("2025-12-29", Accidents=float("inf"))])
    fake_client([tab])

    districts = fetch_sheet_data(settings)

    assert districts is not None
    assert districts[0].stats[0].accident_count == 0
    assert districts[0].stats[0].staff_count == 120
