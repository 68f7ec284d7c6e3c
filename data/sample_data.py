"""Built-in component sets and sample files for the Course Attendance Calculator."""

import os
from typing import List

import pandas as pd

from config.defaults import COMPONENT_SETS
from models.component import ComponentRecord


def build_component_set(set_name: str) -> List[ComponentRecord]:
    """Fresh records for a built-in set, every count starting at 0."""
    if set_name not in COMPONENT_SETS:
        raise ValueError(
            f"Unknown component set: {set_name}. "
            f"Expected one of: {sorted(COMPONENT_SETS)}"
        )
    return [
        ComponentRecord(id=cid, name=name, attended=0, total=0, icon=icon)
        for cid, name, icon in COMPONENT_SETS[set_name]
    ]


def generate_components_df(set_name: str = "standard") -> pd.DataFrame:
    """Component list in the upload format, with example counts filled in."""
    example_counts = {
        "lecture": (34, 40),
        "practical": (11, 16),
        "skill": (7, 12),
        "tutorial": (9, 10),
    }
    rows = []
    for record in build_component_set(set_name):
        attended, total = example_counts.get(record.id, (0, 0))
        rows.append({
            "Component ID": record.id,
            "Component Name": record.name,
            "Attended": attended,
            "Total": total,
        })
    return pd.DataFrame(rows)


def generate_sample_csvs(output_dir: str):
    """Write one sample CSV per built-in set to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    for set_name in COMPONENT_SETS:
        generate_components_df(set_name).to_csv(
            os.path.join(output_dir, f"components_{set_name}.csv"), index=False,
        )


def generate_sample_excel(output_dir: str):
    """Write a single Excel workbook with the standard component list."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "components.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_components_df("standard").to_excel(writer, sheet_name="Components", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csvs(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
