"""Schema validation for uploaded component lists."""

import logging
from dataclasses import dataclass, field
from typing import List

import pandas as pd

from engine.calculator import is_count_text, parse_count

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


COMPONENT_REQUIRED_COLUMNS = [
    "Component ID",
    "Component Name",
]

COMPONENT_COUNT_COLUMNS = [
    "Attended",
    "Total",
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_components(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, COMPONENT_REQUIRED_COLUMNS, "Components")
    if not result.is_valid:
        logger.warning("Component list rejected: %s", "; ".join(result.errors))
        return result

    ids = df["Component ID"].astype(str).str.strip()
    if (ids == "").any() or df["Component ID"].isna().any():
        result.is_valid = False
        result.errors.append("Components: Component ID cannot be blank.")

    dupes = ids.duplicated(keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(f"Components: Duplicate component IDs: {ids[dupes].unique().tolist()}")

    for col in COMPONENT_COUNT_COLUMNS:
        if col not in df.columns:
            result.warnings.append(f"Components: No '{col}' column — counts will start at 0.")
            continue
        # Blank cells are 0 without a warning; only unreadable text is flagged
        unreadable = df[col].notna() & ~df[col].map(is_count_text)
        if unreadable.any():
            result.warnings.append(
                f"Components: Non-numeric '{col}' values will be treated as 0."
            )
        if (df[col].map(parse_count) < 0).any():
            result.is_valid = False
            result.errors.append(f"Components: {col} cannot be negative.")

    if "Attended" in df.columns and "Total" in df.columns:
        attended = df["Attended"].map(parse_count)
        total = df["Total"].map(parse_count)
        over = df[attended > total]
        if not over.empty:
            result.warnings.append(
                f"Components: Attended exceeds Total for "
                f"{', '.join(over['Component ID'].astype(str))} — percentages above 100% will be shown."
            )

    if not result.is_valid:
        logger.warning("Component list rejected: %s", "; ".join(result.errors))
    return result
