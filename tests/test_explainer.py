"""Tests for the overall attendance explainer."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.component import ComponentRecord
from engine.calculator import summarize
from engine.explainer import explain_summary


def make_record(cid, attended=0, total=0, name=None):
    return ComponentRecord(cid, name or cid.title(), attended, total)


class TestExplainSummary:
    def test_no_active_components(self):
        steps = explain_summary(summarize([make_record("lecture")]))
        assert len(steps) == 1
        assert "0.0%" in steps[0]

    def test_mentions_each_active_component(self):
        records = [
            make_record("lecture", 8, 10, "Lectures"),
            make_record("practical", 3, 10, "Practicals"),
        ]
        steps = explain_summary(summarize(records))
        text = "\n".join(steps)

        assert "Lectures: 8 of 10 attended => 80.0%" in text
        assert "Practicals: 3 of 10 attended => 30.0%" in text
        assert "(80.0% + 30.0%) / 2 = 55.0%" in text
        assert steps[-1].endswith("Low")

    def test_inactive_components_noted(self):
        records = [
            make_record("lecture", 9, 10, "Lectures"),
            make_record("tutorial", 0, 0, "Tutorials"),
        ]
        steps = explain_summary(summarize(records))
        assert any("Tutorials excluded" in s for s in steps)
        assert "1 of 2" in steps[0]
