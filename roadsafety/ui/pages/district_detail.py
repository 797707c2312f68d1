from __future__ import annotations

import datetime as dt

import pandas as pd
import streamlit as st

from roadsafety.config import REPORT_DAYS, REPORT_START_DATE
from roadsafety.data.aggregations import daily_frame, stats_totals
from roadsafety.data.source import find_district
from roadsafety.ui.components.charts import SERIES_COLORS, line_chart, render_plotly
from roadsafety.ui.components.formatting import format_thai_date
from roadsafety.ui.components.tables import render_table
from roadsafety.ui.pages.context import PageContext

DAILY_COLUMN_LABELS = {
    "date": "วันที่",
    "staff_count": "เจ้าหน้าที่ (เฉลี่ย/วัน)",
    "service_users": "ผู้ใช้บริการ (ราย)",
    "restroom_users": "ห้องน้ำ (ราย)",
    "assistance_count": "ช่วยเหลือ (ครั้ง)",
    "accident_count": "อุบัติเหตุ (ครั้ง)",
    "fatality_count": "เสียชีวิต (ราย)",
}


def _window_label() -> str:
    end = REPORT_START_DATE + dt.timedelta(days=REPORT_DAYS - 1)
    return f"{format_thai_date(REPORT_START_DATE, with_year=True)} - {format_thai_date(end, with_year=True)}"


def render(context: PageContext, district_id: str) -> None:
    district = find_district(context.districts, district_id)
    if district is None:
        st.error(f"ไม่พบหน่วยงาน `{district_id}`")
        return

    st.subheader(district.name)
    st.markdown(f"#### สถิติการปฏิบัติงานรายวัน ({_window_label()})")

    rows = daily_frame(district.stats)
    if rows.empty:
        st.info("ยังไม่มีข้อมูลรายวันสำหรับหน่วยงานนี้")
        return

    totals = stats_totals(district.stats)
    total_row = {
        "date": "รวม",
        "staff_count": totals.staff,
        "service_users": totals.service,
        "restroom_users": totals.restroom,
        "assistance_count": totals.assistance,
        "accident_count": totals.accident,
        "fatality_count": totals.fatality,
    }
    table = rows.copy()
    table["date"] = table["date"].apply(lambda d: format_thai_date(d, with_year=True))
    table = pd.concat([table, pd.DataFrame([total_row])], ignore_index=True)
    render_table(
        table,
        column_config={c: {"type": "number"} for c in DAILY_COLUMN_LABELS if c != "date"},
        column_labels=DAILY_COLUMN_LABELS,
        export_file_name=f"{district.id}_daily.csv",
    )

    chart_df = rows.assign(date=pd.to_datetime(rows["date"]))
    labels = {"accident_count": "อุบัติเหตุ", "fatality_count": "เสียชีวิต"}
    colors = {"accident_count": SERIES_COLORS["accident"], "fatality_count": SERIES_COLORS["fatality"]}
    render_plotly(line_chart(chart_df, "date", list(labels), labels, colors, title="อุบัติเหตุและผู้เสียชีวิตรายวัน"))
