"""Tests for component list loading, validation and sample data."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import io

import pandas as pd
import pytest

from data.loader import parse_components, summary_to_df, load_file, load_csv_path
from data.validator import validate_components
from data.sample_data import build_component_set, generate_components_df, generate_sample_csvs
from engine.calculator import summarize


def make_df(rows=None):
    rows = rows if rows is not None else [
        {"Component ID": "lecture", "Component Name": "Lectures", "Attended": 8, "Total": 10},
        {"Component ID": "lab", "Component Name": "Labs", "Attended": 3, "Total": 10},
    ]
    return pd.DataFrame(rows)


class NamedBuffer(io.BytesIO):
    def __init__(self, data: bytes, name: str):
        super().__init__(data)
        self.name = name


class TestValidateComponents:
    def test_valid(self):
        result = validate_components(make_df())
        assert result.is_valid
        assert result.errors == []

    def test_missing_columns(self):
        df = pd.DataFrame([{"Component ID": "lecture"}])
        result = validate_components(df)
        assert not result.is_valid
        assert "Component Name" in result.errors[0]

    def test_empty(self):
        df = pd.DataFrame(columns=["Component ID", "Component Name"])
        result = validate_components(df)
        assert not result.is_valid

    def test_duplicate_ids(self):
        df = make_df([
            {"Component ID": "lecture", "Component Name": "Lectures"},
            {"Component ID": "lecture", "Component Name": "Lectures again"},
        ])
        result = validate_components(df)
        assert not result.is_valid
        assert any("Duplicate" in e for e in result.errors)

    def test_negative_counts(self):
        df = make_df([{"Component ID": "lecture", "Component Name": "Lectures", "Attended": -1, "Total": 5}])
        result = validate_components(df)
        assert not result.is_valid

    def test_attended_above_total_is_warning(self):
        df = make_df([{"Component ID": "lecture", "Component Name": "Lectures", "Attended": 12, "Total": 10}])
        result = validate_components(df)
        assert result.is_valid
        assert any("exceeds" in w for w in result.warnings)

    def test_missing_count_columns_is_warning(self):
        df = pd.DataFrame([{"Component ID": "lecture", "Component Name": "Lectures"}])
        result = validate_components(df)
        assert result.is_valid
        assert len(result.warnings) == 2

    def test_negative_text_count_rejected(self):
        df = make_df([{"Component ID": "lecture", "Component Name": "Lectures", "Attended": "-3x", "Total": 5}])
        result = validate_components(df)
        assert not result.is_valid
        assert any("negative" in e for e in result.errors)

    def test_leading_number_text_not_flagged(self):
        df = make_df([{"Component ID": "lecture", "Component Name": "Lectures", "Attended": "12abc", "Total": "20"}])
        result = validate_components(df)
        assert result.is_valid
        assert not any("Non-numeric" in w for w in result.warnings)
        assert parse_components(df)[0].attended == 12

    def test_unreadable_text_flagged(self):
        df = make_df([
            {"Component ID": "lecture", "Component Name": "Lectures", "Attended": "abc", "Total": 20},
            {"Component ID": "lab", "Component Name": "Labs", "Attended": None, "Total": 4},
        ])
        result = validate_components(df)
        assert result.is_valid
        assert result.warnings == ["Components: Non-numeric 'Attended' values will be treated as 0."]

    def test_attended_above_total_uses_parsed_counts(self):
        df = make_df([{"Component ID": "lecture", "Component Name": "Lectures", "Attended": "12 classes", "Total": "10"}])
        result = validate_components(df)
        assert any("exceeds" in w for w in result.warnings)


class TestParseComponents:
    def test_parse(self):
        records = parse_components(make_df())
        assert [r.id for r in records] == ["lecture", "lab"]
        assert records[0].attended == 8
        assert records[0].total == 10

    def test_counts_default_to_zero(self):
        df = pd.DataFrame([{"Component ID": " skill ", "Component Name": "Skills"}])
        records = parse_components(df)
        assert records[0].id == "skill"
        assert records[0].attended == 0
        assert records[0].total == 0

    def test_blank_and_text_counts(self):
        df = make_df([
            {"Component ID": "a", "Component Name": "A", "Attended": None, "Total": 4},
            {"Component ID": "b", "Component Name": "B", "Attended": "x", "Total": "6"},
        ])
        records = parse_components(df)
        assert records[0].attended == 0
        assert records[1].attended == 0
        assert records[1].total == 6


class TestLoadFile:
    def test_csv(self):
        buf = NamedBuffer(make_df().to_csv(index=False).encode("utf-8"), "components.CSV")
        df = load_file(buf)
        assert list(df["Component ID"]) == ["lecture", "lab"]

    def test_unsupported_format(self):
        with pytest.raises(ValueError):
            load_file(NamedBuffer(b"{}", "components.json"))

    def test_legacy_xls_rejected(self):
        with pytest.raises(ValueError):
            load_file(NamedBuffer(b"", "components.xls"))

    def test_csv_path(self, tmp_path):
        generate_sample_csvs(str(tmp_path))
        df = load_csv_path(str(tmp_path / "components_no_tutorials.csv"))
        assert len(df) == 3
        assert validate_components(df).is_valid


class TestSampleData:
    def test_standard_set(self):
        records = build_component_set("standard")
        assert [r.id for r in records] == ["lecture", "practical", "skill", "tutorial"]
        assert all(r.attended == 0 and r.total == 0 for r in records)

    def test_no_tutorials_set(self):
        records = build_component_set("no_tutorials")
        assert "tutorial" not in [r.id for r in records]

    def test_unknown_set(self):
        with pytest.raises(ValueError):
            build_component_set("evening")

    def test_template_round_trips_through_parser(self):
        records = parse_components(generate_components_df("standard"))
        assert len(records) == 4
        assert all(r.is_active for r in records)


class TestSummaryToDf:
    def test_columns(self):
        df = summary_to_df(summarize(parse_components(make_df())))
        assert list(df["Attendance %"]) == [80.0, 30.0]
        assert list(df["Band"]) == ["Good", "Low"]
        assert list(df["Counted in Overall"]) == ["Yes", "Yes"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
