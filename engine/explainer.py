"""Generates human-readable explanations for the overall attendance figure."""

from typing import List

from models.summary import AttendanceSummary


def explain_summary(summary: AttendanceSummary) -> List[str]:
    """Produce step-by-step explanation of how the overall percentage was derived."""
    steps = []

    active = [r for r in summary.results if r.is_active]
    inactive = [r for r in summary.results if not r.is_active]

    if not active:
        steps.append("No classes recorded yet — overall attendance is 0.0%.")
        return steps

    names = ", ".join(r.name for r in active)
    steps.append(
        f"Step 1 - Active components: {len(active)} of {len(summary.results)} "
        f"have classes recorded ({names})"
    )
    if inactive:
        steps.append(
            f"Note: {', '.join(r.name for r in inactive)} excluded (no classes held yet)"
        )

    rates = []
    for r in active:
        rates.append(f"{r.percentage:.1f}%")
        steps.append(
            f"Step 2 - {r.name}: {r.attended} of {r.total} attended => {r.percentage:.1f}%"
        )

    steps.append(
        f"Step 3 - Average of rates: ({' + '.join(rates)}) / {len(active)} "
        f"= {summary.overall_percentage:.1f}%"
    )

    steps.append(
        f"Step 4 - Band: {summary.overall_percentage:.1f}% => {summary.overall_band}"
    )

    return steps
