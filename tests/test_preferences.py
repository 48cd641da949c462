"""Tests for business preferences parsing and merging."""

from __future__ import annotations

import json

import pytest

from linkopt.data.preferences import BusinessPreferences, load_preferences, merge_preferences
from linkopt.errors import PreferencesError


class TestDefaults:
    def test_defaults(self):
        prefs = BusinessPreferences()
        assert prefs.primary_goal == "balanced"
        assert prefs.optimization_areas == set()
        assert prefs.timeline == "moderate"
        assert prefs.output_formats == ["console"]
        assert prefs.create_action_plan is False


class TestLoadPreferences:
    def test_camel_case_keys(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({
            "primaryGoal": "conversions",
            "optimizationAreas": ["orphaned", "technical"],
            "outputFormats": ["markdown", "html"],
            "createActionPlan": True,
            "wordpressIntegration": "yes",
        }))
        prefs = load_preferences(path)
        assert prefs.primary_goal == "conversions"
        assert prefs.optimization_areas == {"orphaned", "technical"}
        assert prefs.output_formats == ["markdown", "html"]
        assert prefs.create_action_plan is True
        assert prefs.wordpress_integration == "yes"

    def test_snake_case_keys(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"primary_goal": "traffic", "timeline": "gradual"}))
        prefs = load_preferences(path)
        assert prefs.primary_goal == "traffic"
        assert prefs.timeline == "gradual"

    def test_missing_file(self, tmp_path):
        with pytest.raises(PreferencesError, match="not found"):
            load_preferences(tmp_path / "nope.json")

    def test_bad_json(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("{not json")
        with pytest.raises(PreferencesError, match="not valid JSON"):
            load_preferences(path)

    def test_invalid_goal(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"primaryGoal": "world-domination"}))
        with pytest.raises(PreferencesError):
            load_preferences(path)


class TestMergePreferences:
    def test_none_overrides_are_ignored(self):
        base = BusinessPreferences(primary_goal="traffic")
        assert merge_preferences(base, primary_goal=None, timeline=None) is base

    def test_overrides_apply(self):
        base = BusinessPreferences(primary_goal="traffic", timeline="gradual")
        merged = merge_preferences(base, primary_goal="conversions", output_formats=["csv"])
        assert merged.primary_goal == "conversions"
        assert merged.timeline == "gradual"
        assert merged.output_formats == ["csv"]

    def test_invalid_override(self):
        with pytest.raises(PreferencesError):
            merge_preferences(BusinessPreferences(), output_formats=["pdf"])
