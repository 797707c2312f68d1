"""
Layout helpers for the Streamlit application (page config, header, sidebar).
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import streamlit as st

from roadsafety.config import REPORT_SUBTITLE, REPORT_TITLE
from roadsafety.data.models import District

OVERVIEW_KEY = "overview"
DISTRICT_QUERY_PARAM = "district"


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Highway Festival Operations",
        layout="wide",
        page_icon=":motorway:",
    )


def render_header(is_mock: bool) -> None:
    title_col, status_col = st.columns([4, 1])
    with title_col:
        st.title(REPORT_TITLE)
        st.caption(REPORT_SUBTITLE)
    with status_col:
        if is_mock:
            st.info("สถานะ: ข้อมูลจำลอง (Mock Data)")
        else:
            st.success("สถานะ: ข้อมูลจริง (Google Sheets)")


def resolve_district_request(requested: Optional[str], district_ids: Sequence[str]) -> Tuple[Optional[str], bool]:
    """Split a `?district=` value into (known district id or None, was it unknown)."""
    if not requested or requested == OVERVIEW_KEY:
        return None, False
    if requested in district_ids:
        return requested, False
    return None, True


def sidebar_navigation(districts: Sequence[District]) -> Optional[str]:
    """Pick the overview (returns None) or a district id.

    The choice is mirrored into the `?district=` query parameter so detail
    views can be linked directly. A link to an unknown id lands on the
    overview with a warning and the parameter is dropped.
    """
    district_ids = [d.id for d in districts]
    names = {d.id: d.name for d in districts}
    requested = st.query_params.get(DISTRICT_QUERY_PARAM)
    known, unknown = resolve_district_request(requested, district_ids)
    if unknown:
        st.warning(f"ไม่พบหน่วยงาน `{requested}` จึงแสดงภาพรวมแทน")

    options = [OVERVIEW_KEY] + district_ids
    st.sidebar.header("เมนู")
    choice = st.sidebar.radio(
        "หน้า",
        options,
        index=options.index(known) if known else 0,
        format_func=lambda key: "ภาพรวม" if key == OVERVIEW_KEY else names.get(key, key),
        label_visibility="collapsed",
    )
    if choice == OVERVIEW_KEY:
        if DISTRICT_QUERY_PARAM in st.query_params:
            del st.query_params[DISTRICT_QUERY_PARAM]
        return None
    st.query_params[DISTRICT_QUERY_PARAM] = choice
    return choice
