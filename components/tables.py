"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd

from config.defaults import BAND_GOOD, BAND_MODERATE, BAND_LOW


def band_style(val) -> str:
    if val == BAND_LOW:
        return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
    elif val == BAND_MODERATE:
        return "background-color: #fff3cd; color: #856404; font-weight: bold"
    elif val == BAND_GOOD:
        return "background-color: #d4edda; color: #155724; font-weight: bold"
    return ""


def render_band_table(df: pd.DataFrame, band_column: str = "Band"):
    """Render a table with color-coded attendance bands."""
    if band_column in df.columns:
        styled = df.style.map(band_style, subset=[band_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
