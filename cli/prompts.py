"""Interactive question flow for ``linkopt analyze --interactive``.

Each question prints a numbered menu and reads the answer with
``typer.prompt``.  Multi-select questions take comma-separated numbers.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import typer

from linkopt.data.preferences import BusinessPreferences

Choice = Tuple[str, str]  # (value, label)

GOAL_CHOICES: List[Choice] = [
    ("conversions", "Increase Conversions (Focus on Money Pages)"),
    ("traffic", "Boost Organic Traffic (Focus on Content Pages)"),
    ("authority", "Build Authority & Trust (Focus on Supporting Content)"),
    ("balanced", "Balanced Approach (All Content Types)"),
]
WEBSITE_TYPE_CHOICES: List[Choice] = [
    ("service", "Service-based business"),
    ("ecommerce", "E-commerce store"),
    ("content", "Content/blog site"),
    ("corporate", "Corporate website"),
    ("other", "Other"),
]
AREA_CHOICES: List[Choice] = [
    ("orphaned", "Fix orphaned pages (pages with almost no internal links)"),
    ("distribution", "Improve link distribution across content tiers"),
    ("clusters", "Create topic clusters and hub pages"),
    ("anchors", "Optimize anchor text strategy"),
    ("technical", "Fix technical issues (broken links, etc.)"),
    ("architecture", "Improve site architecture"),
]
CAPACITY_CHOICES: List[Choice] = [
    ("high", "High - I can create new content and modify existing pages"),
    ("medium", "Medium - I can modify existing content but limited new content"),
    ("low", "Low - I prefer to work with existing content only"),
]
TIMELINE_CHOICES: List[Choice] = [
    ("aggressive", "1 month - Aggressive optimization"),
    ("moderate", "3 months - Moderate, steady progress"),
    ("gradual", "6 months - Gradual, sustainable approach"),
]
WORDPRESS_CHOICES: List[Choice] = [
    ("yes", "Yes - I use WordPress and want plugin recommendations"),
    ("no", "No - I use a different CMS/platform"),
    ("unsure", "Not sure - I want general recommendations"),
]
PLUGIN_CHOICES: List[Choice] = [
    ("Link Whisper", "Link Whisper (Recommended)"),
    ("Internal Link Juicer", "Internal Link Juicer"),
    ("Yoast SEO", "Yoast SEO"),
    ("Manual implementation", "Manual implementation"),
]
LINK_MANAGEMENT_CHOICES: List[Choice] = [
    ("automated", "Automated tools (plugins, scripts)"),
    ("manual", "Manual implementation with detailed instructions"),
    ("hybrid", "Hybrid approach (automated + manual review)"),
]
MONITORING_CHOICES: List[Choice] = [
    ("gsc", "Google Search Console"),
    ("ga", "Google Analytics"),
    ("screaming-frog", "Screaming Frog SEO Spider"),
    ("ahrefs", "Ahrefs"),
    ("semrush", "SEMrush"),
    ("none", "None of the above"),
]
DETAIL_CHOICES: List[Choice] = [
    ("summary", "Executive Summary - High-level overview and key actions"),
    ("detailed", "Detailed Analysis - Comprehensive report with all findings"),
    ("action-focused", "Action-Focused - Prioritized tasks and implementation steps"),
]
FORMAT_CHOICES: List[Choice] = [
    ("console", "Console display (terminal output)"),
    ("markdown", "Markdown file (.md)"),
    ("csv", "CSV file for spreadsheet analysis"),
    ("html", "HTML report for web viewing"),
]


def _menu(message: str, choices: Sequence[Choice]) -> None:
    typer.echo("")
    typer.secho(message, bold=True)
    for i, (_, label) in enumerate(choices, start=1):
        typer.echo(f"  {i}. {label}")


def parse_selection(raw: str, count: int) -> List[int]:
    """Turn ``"1, 3"`` into ``[0, 2]``; raises ValueError on bad input."""
    picks: List[int] = []
    for part in raw.replace(" ", "").split(","):
        if not part:
            continue
        index = int(part) - 1
        if not 0 <= index < count:
            raise ValueError(f"choice out of range: {part}")
        if index not in picks:
            picks.append(index)
    return picks


def ask_choice(message: str, choices: Sequence[Choice], default: str) -> str:
    _menu(message, choices)
    values = [value for value, _ in choices]
    default_number = values.index(default) + 1 if default in values else 1
    while True:
        number = typer.prompt("Select", default=default_number, type=int)
        if 1 <= number <= len(choices):
            return values[number - 1]
        typer.echo(f"Please enter a number between 1 and {len(choices)}.")


def ask_many(
    message: str,
    choices: Sequence[Choice],
    default: Sequence[str] = (),
    required: bool = False,
) -> List[str]:
    _menu(message + " (comma-separated numbers)", choices)
    values = [value for value, _ in choices]
    default_raw = ",".join(str(values.index(v) + 1) for v in default if v in values)
    while True:
        raw = typer.prompt("Select", default=default_raw, show_default=bool(default_raw))
        try:
            picks = parse_selection(raw, len(choices))
        except ValueError:
            typer.echo(f"Please enter numbers between 1 and {len(choices)}.")
            continue
        if required and not picks:
            typer.echo("Please select at least one option.")
            continue
        return [values[i] for i in picks]


def run_interactive_flow(defaults: Optional[BusinessPreferences] = None) -> BusinessPreferences:
    """Ask the full question set and return the resulting preferences."""
    defaults = defaults or BusinessPreferences()

    typer.secho("\nPhase 1: Business Goals", fg=typer.colors.YELLOW, bold=True)
    primary_goal = ask_choice(
        "What is your primary business goal for internal linking optimization?",
        GOAL_CHOICES, defaults.primary_goal,
    )
    website_type = ask_choice(
        "What type of website are you optimizing?",
        WEBSITE_TYPE_CHOICES, defaults.website_type or "service",
    )

    typer.secho("\nPhase 2: Current State Assessment", fg=typer.colors.YELLOW, bold=True)
    areas = ask_many(
        "Which areas need the most attention?",
        AREA_CHOICES, sorted(defaults.optimization_areas) or ["orphaned", "distribution"],
    )
    capacity = ask_choice(
        "What is your content creation capacity?",
        CAPACITY_CHOICES, defaults.content_capacity or "medium",
    )
    timeline = ask_choice(
        "What is your preferred implementation timeline?",
        TIMELINE_CHOICES, defaults.timeline,
    )

    typer.secho("\nPhase 3: Technical Implementation", fg=typer.colors.YELLOW, bold=True)
    wordpress = ask_choice(
        "Do you use WordPress for your website?",
        WORDPRESS_CHOICES, defaults.wordpress_integration or "yes",
    )
    plugin = None
    if wordpress == "yes":
        plugin = ask_choice(
            "Which WordPress plugin would you prefer for internal linking?",
            PLUGIN_CHOICES, defaults.wordpress_plugin or "Link Whisper",
        )
    link_management = ask_choice(
        "How do you prefer to manage internal links?",
        LINK_MANAGEMENT_CHOICES, defaults.link_management or "hybrid",
    )
    monitoring = ask_many(
        "Which tools do you currently use for SEO monitoring?",
        MONITORING_CHOICES, defaults.monitoring_tools or ["gsc"],
    )

    typer.secho("\nPhase 4: Report Preferences", fg=typer.colors.YELLOW, bold=True)
    detail = ask_choice(
        "How detailed should your optimization report be?",
        DETAIL_CHOICES, defaults.report_detail,
    )
    formats = ask_many(
        "How would you like to receive your optimization report?",
        FORMAT_CHOICES, defaults.output_formats, required=True,
    )
    action_plan = typer.confirm(
        "Would you like to create a detailed action plan with specific tasks and deadlines?",
        default=True,
    )

    return BusinessPreferences(
        primary_goal=primary_goal,
        website_type=website_type,
        optimization_areas=set(areas),
        content_capacity=capacity,
        timeline=timeline,
        wordpress_integration=wordpress,
        wordpress_plugin=plugin,
        link_management=link_management,
        monitoring_tools=[tool for tool in monitoring if tool != "none"],
        report_detail=detail,
        output_formats=formats,
        create_action_plan=action_plan,
    )
