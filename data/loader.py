"""File upload parsing — CSV/XLSX component lists into ComponentRecord lists."""

import logging
from typing import List

import pandas as pd

from engine.calculator import parse_count
from models.component import ComponentRecord
from models.summary import AttendanceSummary

logger = logging.getLogger(__name__)


def parse_components(df: pd.DataFrame) -> List[ComponentRecord]:
    """Convert a components DataFrame into ComponentRecord objects."""
    records = []
    for _, row in df.iterrows():
        attended = row["Attended"] if "Attended" in df.columns and pd.notna(row.get("Attended")) else 0
        total = row["Total"] if "Total" in df.columns and pd.notna(row.get("Total")) else 0
        records.append(ComponentRecord(
            id=str(row["Component ID"]).strip(),
            name=str(row["Component Name"]).strip(),
            attended=parse_count(attended),
            total=parse_count(total),
        ))
    logger.info("Parsed %d components from upload", len(records))
    return records


def summary_to_df(summary: AttendanceSummary) -> pd.DataFrame:
    """Flatten a summary into a table, one row per component."""
    rows = []
    for r in summary.results:
        rows.append({
            "Component ID": r.id,
            "Component Name": r.name,
            "Attended": r.attended,
            "Total": r.total,
            "Attendance %": round(r.percentage, 1),
            "Band": r.band,
            "Counted in Overall": "Yes" if r.is_active else "No",
        })
    return pd.DataFrame(rows)


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


def load_csv_path(path: str) -> pd.DataFrame:
    """Load a CSV file from a local path."""
    return pd.read_csv(path)
