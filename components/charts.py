"""Plotly chart builders for the Course Attendance Calculator."""

import plotly.graph_objects as go
import pandas as pd
from typing import List, Optional

from config.defaults import (
    BAND_COLORS, BAND_GOOD, BAND_MODERATE,
    GOOD_THRESHOLD, MODERATE_THRESHOLD,
)
from engine.calculator import band_color
from models.summary import ComponentResult


def _cutoffs(thresholds: Optional[dict]) -> tuple[float, float]:
    cfg = thresholds or {}
    return (
        cfg.get("good_threshold", GOOD_THRESHOLD),
        cfg.get("moderate_threshold", MODERATE_THRESHOLD),
    )


def component_percentage_bar(
    results: List[ComponentResult],
    thresholds: Optional[dict] = None,
    title: str = "Attendance by Component",
) -> go.Figure:
    """Horizontal bars, one per component, colored by band."""
    df = pd.DataFrame([
        {"name": r.name, "percentage": r.percentage, "band": r.band}
        for r in results
    ])
    fig = go.Figure()
    if not df.empty:
        fig.add_trace(go.Bar(
            x=df["percentage"],
            y=df["name"],
            orientation="h",
            marker_color=[band_color(b) for b in df["band"]],
            text=[f"{p:.1f}%" for p in df["percentage"]],
            textposition="auto",
            hovertemplate="%{y}: %{x:.1f}%<extra></extra>",
        ))

    # Band cut-off guides
    good, moderate = _cutoffs(thresholds)
    for threshold, band in [(good, BAND_GOOD), (moderate, BAND_MODERATE)]:
        fig.add_vline(
            x=threshold, line_dash="dash", line_color=BAND_COLORS[band],
            annotation_text=f"{threshold:.0f}%", annotation_position="top",
        )

    upper = max([100.0] + [r.percentage for r in results])
    fig.update_layout(
        title=title,
        xaxis_title="Attendance %",
        xaxis_range=[0, upper * 1.05],
        yaxis=dict(autorange="reversed", type="category"),
        height=max(250, len(results) * 60 + 120),
        showlegend=False,
    )
    return fig


def overall_gauge(
    overall_pct: float,
    band: str,
    thresholds: Optional[dict] = None,
    title: str = "Overall Attendance",
) -> go.Figure:
    """Gauge showing the overall average with band ranges shaded."""
    good, moderate = _cutoffs(thresholds)
    upper = max(100.0, overall_pct)
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=overall_pct,
        number={"suffix": "%", "valueformat": ".1f"},
        gauge={
            "axis": {"range": [0, upper]},
            "bar": {"color": band_color(band)},
            "steps": [
                {"range": [0, moderate], "color": "#FEE2E2"},
                {"range": [moderate, good], "color": "#FEF9C3"},
                {"range": [good, upper], "color": "#DCFCE7"},
            ],
        },
        title={"text": title},
    ))
    fig.update_layout(height=300)
    return fig


def attended_vs_missed_bar(results: List[ComponentResult]) -> go.Figure:
    """Stacked bars of attended and missed classes per active component."""
    active = [r for r in results if r.is_active]
    names = [r.name for r in active]
    attended = [r.attended for r in active]
    missed = [max(0, r.total - r.attended) for r in active]

    fig = go.Figure()
    fig.add_trace(go.Bar(name="Attended", x=names, y=attended, marker_color="#4A90D9"))
    fig.add_trace(go.Bar(name="Missed", x=names, y=missed, marker_color="#E8734A"))
    fig.update_layout(
        barmode="stack",
        title="Classes Attended vs Missed",
        xaxis_title="Component",
        yaxis_title="Classes",
        height=350,
    )
    return fig
