"""Tab 2: Breakdown — charts, table and derivation of the overall figure."""

import streamlit as st

from data.session_store import get_components
from data.loader import summary_to_df
from components.metrics_cards import render_metric_row
from components.charts import component_percentage_bar, overall_gauge, attended_vs_missed_bar
from components.tables import render_band_table
from engine.calculator import summarize, pooled_percentage
from engine.explainer import explain_summary


def render(sidebar_state):
    """Render the Breakdown tab."""
    st.header("Breakdown")

    components = get_components()
    thresholds = sidebar_state.thresholds
    summary = summarize(components, thresholds)

    if summary.active_count == 0:
        st.info("Enter total classes for at least one component to see the breakdown.")
        return

    pooled = pooled_percentage(components)
    render_metric_row([
        {"label": "Overall (average of rates)", "value": f"{summary.overall_percentage:.1f}%"},
        {"label": "Pooled (all classes)", "value": f"{pooled:.1f}%",
         "delta": f"{pooled - summary.overall_percentage:+.1f} pts", "delta_color": "off"},
        {"label": "Classes Attended", "value": f"{summary.total_attended:,} / {summary.total_held:,}"},
        {"label": "Active Components", "value": f"{summary.active_count} / {len(summary.results)}"},
    ])

    st.divider()

    col1, col2 = st.columns([3, 2])
    with col1:
        fig = component_percentage_bar(summary.results, thresholds)
        st.plotly_chart(fig, use_container_width=True)
    with col2:
        fig = overall_gauge(summary.overall_percentage, summary.overall_band, thresholds)
        st.plotly_chart(fig, use_container_width=True)

    fig = attended_vs_missed_bar(summary.results)
    st.plotly_chart(fig, use_container_width=True)

    st.divider()

    st.subheader("Component Table")
    df = summary_to_df(summary)
    render_band_table(df)
    st.download_button(
        "Download CSV",
        data=df.to_csv(index=False).encode("utf-8"),
        file_name="attendance_breakdown.csv",
        mime="text/csv",
    )

    with st.expander("How the overall figure is calculated"):
        for step in explain_summary(summary):
            st.markdown(f"- {step}")
