"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import streamlit as st

from roadsafety.ui.components.formatting import format_number, format_thai_date


def format_columns(df: pd.DataFrame, column_config: Optional[Dict[str, Dict[str, str]]] = None) -> pd.DataFrame:
    """Return a copy of `df` with configured columns rendered as display strings."""
    formatted_df = df.copy()
    for column, config in (column_config or {}).items():
        if column not in formatted_df.columns:
            continue
        fmt_type = config.get("type")
        if fmt_type == "number":
            formatted_df[column] = formatted_df[column].apply(format_number)
        elif fmt_type == "thai_date":
            formatted_df[column] = formatted_df[column].apply(format_thai_date)
    return formatted_df


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Dict[str, str]]] = None,
    column_labels: Optional[Dict[str, str]] = None,
    height: Optional[int] = None,
    export_file_name: str = "export.csv",
) -> None:
    if df.empty:
        st.info("ไม่มีข้อมูลสำหรับแสดงผล")
        return

    formatted_df = format_columns(df, column_config)
    if column_labels:
        formatted_df = formatted_df.rename(columns=column_labels)

    extra = {"height": height} if height else {}
    st.dataframe(
        formatted_df,
        use_container_width=True,
        hide_index=True,
        **extra,
    )

    csv_bytes = df.rename(columns=column_labels or {}).to_csv(index=False).encode("utf-8-sig")
    st.download_button(
        "ดาวน์โหลด CSV",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
    )
