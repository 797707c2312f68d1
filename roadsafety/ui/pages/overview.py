from __future__ import annotations

from typing import List

import streamlit as st

from roadsafety.data.aggregations import (
    daily_trend,
    day_over_day,
    district_chart_frame,
    grand_totals,
    latest_dates,
    summary_frame,
    trend_frame,
    year_over_year,
)
from roadsafety.ui.components.charts import SERIES_COLORS, dual_axis_line_chart, grouped_bar_chart, render_plotly
from roadsafety.ui.components.formatting import format_signed_percent, format_thai_date
from roadsafety.ui.components.kpi import KpiCard, render_kpi_cards
from roadsafety.ui.components.tables import render_table
from roadsafety.ui.pages.context import PageContext

METRIC_LABELS = {
    "staff": "เจ้าหน้าที่",
    "service": "ผู้ใช้บริการ",
    "restroom": "ห้องน้ำ",
    "assistance": "ช่วยเหลือ",
    "accident": "อุบัติเหตุ",
    "fatality": "เสียชีวิต",
}

SUMMARY_COLUMN_LABELS = {
    "district": "หน่วยงาน",
    "staff": "เจ้าหน้าที่ (เฉลี่ย/วัน)",
    "service": "ผู้ใช้บริการ (ราย)",
    "restroom": "ห้องน้ำ (ราย)",
    "assistance": "ช่วยเหลือ (ครั้ง)",
    "accident": "อุบัติเหตุ (ครั้ง)",
    "fatality": "เสียชีวิต (ราย)",
}


def _change_caption(year_pct: float, day_pct: float) -> str:
    return f"ปี: {format_signed_percent(year_pct)} · วัน: {format_signed_percent(day_pct)}"


def render(context: PageContext) -> None:
    districts = context.districts
    totals = grand_totals(districts)
    trend = daily_trend(districts)
    daily = day_over_day(trend)
    yearly = year_over_year(totals)
    today, yesterday = latest_dates(districts)
    today_label = format_thai_date(today)
    yesterday_label = format_thai_date(yesterday) if yesterday else "ก่อนหน้า"

    cards: List[KpiCard] = [
        KpiCard(label="เจ้าหน้าที่ (เฉลี่ย/วัน)", value=totals.staff, delta_color="off"),
        KpiCard(label="ผู้ใช้บริการ (ราย)", value=totals.service, delta_color="off"),
        KpiCard(label="ช่วยเหลือ (ครั้ง)", value=totals.assistance, delta_color="off"),
        KpiCard(
            label="อุบัติเหตุ (ครั้ง)",
            value=totals.accident,
            delta=yearly.accident_change_pct,
            help_text=f"ปีก่อน {totals.accident_prev_year} ครั้ง",
        ),
        KpiCard(
            label="เสียชีวิต (ราย)",
            value=totals.fatality,
            delta=yearly.fatality_change_pct,
            help_text=f"ปีก่อน {totals.fatality_prev_year} ราย",
        ),
        KpiCard(
            label=f"อุบัติเหตุ {today_label or 'วันล่าสุด'}",
            value=daily.accident_today,
            delta=daily.accident_change_pct,
            help_text=f"เทียบกับ {yesterday_label}",
        ),
    ]
    render_kpi_cards(cards, columns=3)

    chart_df = district_chart_frame(districts, today, yesterday)

    overview_col, trend_col = st.columns(2)
    with overview_col:
        st.markdown("#### ภาพรวมสถิติแยกตามหน่วยงาน")
        if chart_df.empty:
            st.info("ไม่มีข้อมูลหน่วยงาน")
        else:
            series = ["staff", "service", "restroom", "assistance", "accident"]
            render_plotly(grouped_bar_chart(chart_df, "label", series, METRIC_LABELS, SERIES_COLORS))

    with trend_col:
        st.markdown("#### แนวโน้มผู้ใช้บริการและอุบัติเหตุรายวัน")
        if not trend:
            st.info("ยังไม่มีข้อมูลรายวัน")
        else:
            fig = dual_axis_line_chart(trend_frame(trend), "date", "service", "accident", METRIC_LABELS, SERIES_COLORS)
            render_plotly(fig)

    accident_col, fatality_col = st.columns(2)
    comparisons = [
        (accident_col, "accident", "อุบัติเหตุ", yearly.accident_change_pct, daily.accident_change_pct),
        (fatality_col, "fatality", "เสียชีวิต", yearly.fatality_change_pct, daily.fatality_change_pct),
    ]
    for col, metric, label, year_pct, day_pct in comparisons:
        with col:
            st.markdown(f"#### เปรียบเทียบ{label} ({yesterday_label} vs {today_label})")
            st.caption(_change_caption(year_pct, day_pct))
            if chart_df.empty:
                st.info("ไม่มีข้อมูลหน่วยงาน")
                continue
            labels = {
                f"{metric}_yesterday": f"{label} ({yesterday_label})",
                f"{metric}_today": f"{label} ({today_label})",
            }
            colors = {f"{metric}_yesterday": SERIES_COLORS["previous"], f"{metric}_today": SERIES_COLORS[metric]}
            render_plotly(grouped_bar_chart(chart_df, "label", list(labels), labels, colors))

    st.markdown("### ตารางสรุปข้อมูลรายหน่วยงาน")
    summary = summary_frame(districts).drop(columns=["district_id"])
    render_table(
        summary,
        column_config={c: {"type": "number"} for c in METRIC_LABELS},
        column_labels=SUMMARY_COLUMN_LABELS,
        export_file_name="district_summary.csv",
    )
    st.caption("เลือกหน่วยงานจากเมนูด้านซ้ายเพื่อดูสถิติรายวัน")
