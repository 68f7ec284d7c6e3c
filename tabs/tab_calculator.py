"""Tab 1: Calculator — per-component count entry with live percentages."""

import streamlit as st

from data.session_store import (
    get_components, update_component_count, input_key,
)
from components.metrics_cards import render_progress_bar, render_overall_card, render_alert_card
from engine.calculator import summarize
from config.defaults import BAND_LOW, BAND_MODERATE, COUNT_MAX_CHARS


def _on_count_change(component_id: str, field: str):
    update_component_count(component_id, field, st.session_state[input_key(component_id, field)])


def _count_input(label: str, component_id: str, field: str, value: int):
    key = input_key(component_id, field)
    if key not in st.session_state:
        # Zero shows as an empty field
        st.session_state[key] = str(value) if value else ""
    st.text_input(
        label,
        key=key,
        placeholder="0",
        max_chars=COUNT_MAX_CHARS,
        on_change=_on_count_change,
        args=(component_id, field),
    )


def render(sidebar_state):
    """Render the Calculator tab."""
    st.header("🧮 Course Attendance Calculator")

    components = get_components()
    if not components:
        st.info("No components configured. Pick a component set in the sidebar or import one in Setup.")
        return

    summary = summarize(components, sidebar_state.thresholds)

    for record, result in zip(components, summary.results):
        with st.container(border=True):
            st.subheader(f"{record.icon or '📋'} {record.name}")
            col1, col2, col3 = st.columns(3)
            with col1:
                _count_input("Classes Attended", record.id, "attended", record.attended)
            with col2:
                _count_input("Total Classes", record.id, "total", record.total)
            with col3:
                st.write("")
                render_progress_bar(result)

            if result.attended < 0 or result.total < 0:
                st.caption("Negative counts are kept as entered.")
            elif result.attended > result.total and result.is_active:
                st.caption("Attended exceeds total — percentage is above 100%.")

    st.divider()
    render_overall_card(summary)

    if summary.active_count and summary.overall_band == BAND_LOW:
        render_alert_card(
            f"Overall attendance is {summary.overall_percentage:.1f}%, in the Low band.", level="error",
        )
    elif summary.active_count and summary.overall_band == BAND_MODERATE:
        render_alert_card(
            f"Overall attendance is {summary.overall_percentage:.1f}%, in the Moderate band.", level="warning",
        )
