"""Internal linking optimizer CLI.

Usage:
    linkopt --help
    python cli/main.py --help

Command groups:
    analyze   full pipeline: load, classify, score, report
    pages     search / show / preview individual pages
    clusters  inspect detected topic clusters
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from linkopt.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import List, Optional

import typer

from cli.commands.clusters import clusters_app
from cli.commands.pages import pages_app
from cli.context import exit_on_error, load_store
from cli.prompts import run_interactive_flow
from cli.rendering import optimization_summary, processing_summary
from linkopt.config import settings
from linkopt.data.preferences import BusinessPreferences, load_preferences, merge_preferences
from linkopt.reports.writer import generate_reports, open_html_report
from linkopt.scoring.aggregator import analyze_site, is_orphaned

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="linkopt",
    help="Analyse a site crawl export and recommend internal linking improvements.",
    no_args_is_help=True,
)
app.add_typer(pages_app, name="pages")
app.add_typer(clusters_app, name="clusters")


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )


# ---------------------------------------------------------------------------
# Full analysis
# ---------------------------------------------------------------------------
@app.command("analyze")
@exit_on_error
def analyze(
    csv_path: Optional[Path] = typer.Argument(None, help="Crawl export CSV (defaults to LINKOPT_DATA_FILE)."),
    goal: Optional[str] = typer.Option(None, "--goal", help="conversions | traffic | authority | balanced"),
    areas: Optional[List[str]] = typer.Option(None, "--area", help="Optimisation area; repeat for several."),
    formats: Optional[List[str]] = typer.Option(None, "--format", help="console | markdown | csv | html; repeatable."),
    timeline: Optional[str] = typer.Option(None, "--timeline", help="aggressive | moderate | gradual"),
    action_plan: Optional[bool] = typer.Option(None, "--action-plan/--no-action-plan", help="Include the action plan."),
    preferences_file: Optional[Path] = typer.Option(None, "--preferences", help="JSON file with business preferences."),
    interactive: bool = typer.Option(False, "--interactive", "-i", help="Ask the preference questions."),
    reports_dir: Optional[Path] = typer.Option(None, "--reports-dir", help="Where report files are written."),
    open_browser: Optional[bool] = typer.Option(None, "--open/--no-open", help="Open the HTML report when done."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Run the full analysis and write the chosen reports."""
    configure_logging(verbose)

    store = load_store(csv_path)
    pages = store.pages
    for line in processing_summary(store.partition, sum(1 for p in pages if is_orphaned(p))):
        typer.echo(line)

    preferences = load_preferences(preferences_file) if preferences_file else BusinessPreferences()
    if interactive:
        preferences = run_interactive_flow(preferences)
    preferences = merge_preferences(
        preferences,
        primary_goal=goal,
        optimization_areas=set(areas) if areas else None,
        output_formats=formats or None,
        timeline=timeline,
        create_action_plan=action_plan,
    )
    logger.debug("Preferences: %s", preferences.model_dump())

    analysis = analyze_site(pages, preferences)
    typer.echo(
        f"Analysis complete: {analysis.overall.score}/100 ({analysis.overall.grade}), "
        f"{len(analysis.opportunities)} opportunities, "
        f"{len(analysis.recommendations)} recommendations"
    )

    reports = generate_reports(analysis, preferences, reports_dir=reports_dir)
    if "console" in reports:
        typer.echo("")
        typer.echo(reports["console"].content)

    for fmt, report in reports.items():
        if report.path is not None:
            typer.echo(f"{fmt.capitalize()} report: {report.path}")

    should_open = settings.open_browser if open_browser is None else open_browser
    if "html" in reports and should_open:
        open_html_report(reports["html"].path)

    for line in optimization_summary(analysis, preferences):
        typer.echo(line)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
