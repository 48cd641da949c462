"""Business preferences gathered from the operator.

Only ``primary_goal`` and ``optimization_areas`` influence the analysis, and
only its recommendation lists; everything else shapes the rendered reports.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from linkopt.errors import PreferencesError

PrimaryGoal = Literal["conversions", "traffic", "authority", "balanced"]
OptimizationArea = Literal[
    "orphaned", "distribution", "clusters", "anchors", "technical", "architecture"
]
Timeline = Literal["aggressive", "moderate", "gradual"]
OutputFormat = Literal["console", "markdown", "csv", "html"]

PRIMARY_GOALS: tuple[str, ...] = ("conversions", "traffic", "authority", "balanced")
OPTIMIZATION_AREAS: tuple[str, ...] = (
    "orphaned", "distribution", "clusters", "anchors", "technical", "architecture",
)
TIMELINES: tuple[str, ...] = ("aggressive", "moderate", "gradual")
OUTPUT_FORMATS: tuple[str, ...] = ("console", "markdown", "csv", "html")


class BusinessPreferences(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    primary_goal: PrimaryGoal = "balanced"
    optimization_areas: set[OptimizationArea] = set()
    timeline: Timeline = "moderate"
    output_formats: list[OutputFormat] = ["console"]
    create_action_plan: bool = False
    report_detail: Literal["summary", "detailed", "action-focused"] = "detailed"
    website_type: Optional[str] = None
    content_capacity: Optional[Literal["high", "medium", "low"]] = None
    monitoring_tools: list[str] = []
    wordpress_integration: Optional[Literal["yes", "no", "unsure"]] = None
    wordpress_plugin: Optional[str] = None
    link_management: Optional[Literal["automated", "manual", "hybrid"]] = None


def load_preferences(path: Path | str) -> BusinessPreferences:
    """Read a preferences JSON file (snake_case or camelCase keys)."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise PreferencesError(f"Preferences file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise PreferencesError(f"Preferences file is not valid JSON: {exc}") from exc

    try:
        return BusinessPreferences.model_validate(raw)
    except ValidationError as exc:
        raise PreferencesError(f"Invalid preferences in {path}:\n{exc}") from exc


def merge_preferences(base: BusinessPreferences, **overrides) -> BusinessPreferences:
    """Return ``base`` with every non-None override applied and re-validated."""
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return base
    try:
        return BusinessPreferences.model_validate({**base.model_dump(), **updates})
    except ValidationError as exc:
        raise PreferencesError(f"Invalid preferences:\n{exc}") from exc
