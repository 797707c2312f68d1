from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import streamlit as st

from roadsafety.ui.components.formatting import format_number, format_signed_percent


@dataclass
class KpiCard:
    label: str
    value: Optional[float] = None
    delta: Optional[float] = None
    # Accidents and fatalities going up is bad news
    delta_color: str = "inverse"  # normal | inverse | off
    help_text: Optional[str] = None


def _format_delta(card: KpiCard) -> Optional[str]:
    if card.delta is None:
        return None
    return format_signed_percent(card.delta)


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 3) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        st.info("ยังไม่มีข้อมูลตัวชี้วัด")
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                st.metric(
                    label=card.label,
                    value=format_number(card.value),
                    delta=_format_delta(card),
                    delta_color=card.delta_color,
                )
                if card.help_text:
                    st.caption(card.help_text)
