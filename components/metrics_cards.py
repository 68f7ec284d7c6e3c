"""Reusable KPI metric card and progress bar widgets."""

import streamlit as st

from engine.calculator import band_color
from models.summary import AttendanceSummary, ComponentResult


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            delta = m.get("delta")
            delta_color = m.get("delta_color", "normal")
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=delta,
                delta_color=delta_color,
            )


def progress_bar_html(result: ComponentResult) -> str:
    """Colored fill bar labelled with the component's percentage."""
    return (
        '<div style="width:100%;background:#E5E7EB;border-radius:9999px;height:2.5rem;overflow:hidden;">'
        f'<div style="width:{result.fill_width:.1f}%;height:100%;background:{band_color(result.band)};'
        'display:flex;align-items:center;justify-content:center;color:white;font-weight:500;'
        'min-width:3.5rem;">'
        f"{result.percentage:.1f}%"
        "</div></div>"
    )


def render_progress_bar(result: ComponentResult):
    st.markdown(progress_bar_html(result), unsafe_allow_html=True)


def render_overall_card(summary: AttendanceSummary):
    """Overall attendance banner with the active-component count."""
    color = band_color(summary.overall_band)
    st.markdown(
        '<div style="background:#EEF2FF;border-radius:0.75rem;padding:1.5rem;'
        'display:flex;align-items:center;justify-content:space-between;">'
        '<span style="font-size:1.25rem;font-weight:600;color:#374151;">% Overall Attendance</span>'
        f'<span style="font-size:1.875rem;font-weight:700;color:{color};">'
        f"{summary.overall_percentage:.1f}%</span></div>",
        unsafe_allow_html=True,
    )
    if summary.active_count:
        st.caption(
            f"Average of {summary.active_count} component"
            f"{'s' if summary.active_count != 1 else ''} with classes held — {summary.overall_band}"
        )


def render_alert_card(message: str, level: str = "warning"):
    """Render an alert card with appropriate styling."""
    if level == "error":
        st.error(message, icon="🔴")
    elif level == "warning":
        st.warning(message, icon="🟡")
    else:
        st.info(message, icon="🔵")
