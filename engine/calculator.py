"""Attendance calculator — pure derivation of percentages, bands and averages."""

import dataclasses
import math
import re
from typing import List, Optional

from models.component import ComponentRecord
from models.summary import AttendanceSummary, ComponentResult
from config.defaults import (
    GOOD_THRESHOLD, MODERATE_THRESHOLD,
    BAND_GOOD, BAND_MODERATE, BAND_LOW, BAND_COLORS,
    EDITABLE_FIELDS,
)

# Leading ASCII integer, same acceptance as a browser's parseInt
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def percentage(attended: int, total: int) -> float:
    """Attendance rate in percent; 0 when no classes have been held."""
    if total == 0:
        return 0.0
    return 100 * attended / total


def classify(pct: float, thresholds: Optional[dict] = None) -> str:
    """Map a percentage to its band: Good, Moderate or Low."""
    cfg = thresholds or {}
    good = cfg.get("good_threshold", GOOD_THRESHOLD)
    moderate = cfg.get("moderate_threshold", MODERATE_THRESHOLD)

    if pct >= good:
        return BAND_GOOD
    if pct >= moderate:
        return BAND_MODERATE
    return BAND_LOW


def band_color(band: str) -> str:
    return BAND_COLORS.get(band, BAND_COLORS[BAND_LOW])


def overall_average(records: List[ComponentRecord]) -> float:
    """Unweighted mean of per-component rates over active components.

    Each active component contributes equally regardless of how many classes
    it has held, so this is an average of rates rather than a pooled ratio.
    """
    active = [r for r in records if r.total > 0]
    if not active:
        return 0.0
    return sum(percentage(r.attended, r.total) for r in active) / len(active)


def pooled_percentage(records: List[ComponentRecord]) -> float:
    """Total attended over total held across all components."""
    return percentage(
        sum(r.attended for r in records),
        sum(r.total for r in records),
    )


def is_count_text(raw_input) -> bool:
    """True when the value starts with a whole number parse_count can read."""
    if raw_input is None or isinstance(raw_input, bool):
        return False
    if isinstance(raw_input, (int, float)):
        return not (isinstance(raw_input, float) and (math.isnan(raw_input) or math.isinf(raw_input)))
    return _LEADING_INT.match(str(raw_input)) is not None


def parse_count(raw_input) -> int:
    """Parse a count field; anything unparseable becomes 0.

    Negative values are passed through, not clamped.
    """
    if raw_input is None or isinstance(raw_input, bool):
        return 0
    if isinstance(raw_input, int):
        return raw_input
    if isinstance(raw_input, float):
        if math.isnan(raw_input) or math.isinf(raw_input):
            return 0
        return int(raw_input)

    match = _LEADING_INT.match(str(raw_input))
    if not match:
        return 0
    try:
        return int(match.group(1))
    except ValueError:
        # Longer than the interpreter's int string conversion limit
        return 0


def update_count(
    records: List[ComponentRecord],
    component_id: str,
    field: str,
    raw_value,
) -> List[ComponentRecord]:
    """Return a new list with one component's attended/total replaced.

    Records other than the edited one are returned as-is; an unknown id
    leaves the list unchanged.
    """
    if field not in EDITABLE_FIELDS:
        raise ValueError(f"Unknown count field: {field}. Use one of {EDITABLE_FIELDS}.")

    value = parse_count(raw_value)
    return [
        dataclasses.replace(r, **{field: value}) if r.id == component_id else r
        for r in records
    ]


def summarize(
    records: List[ComponentRecord],
    thresholds: Optional[dict] = None,
) -> AttendanceSummary:
    """Compute every display value for the current set of components."""
    results = []
    for r in records:
        pct = percentage(r.attended, r.total)
        results.append(ComponentResult(
            id=r.id,
            name=r.name,
            attended=r.attended,
            total=r.total,
            percentage=pct,
            band=classify(pct, thresholds),
            is_active=r.is_active,
        ))

    overall = overall_average(records)
    return AttendanceSummary(
        overall_percentage=overall,
        overall_band=classify(overall, thresholds),
        active_count=sum(1 for r in results if r.is_active),
        total_attended=sum(r.attended for r in records),
        total_held=sum(r.total for r in records),
        results=results,
    )
