"""Commands for browsing individual pages of the crawl export."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from cli.context import exit_on_error, load_store
from linkopt.config import settings
from linkopt.data.preferences import PRIMARY_GOALS
from linkopt.errors import PreferencesError
from linkopt.reports.console import priority_label, score_colour
from linkopt.scoring.classifier import KEYWORD_POLICY
from linkopt.scoring.clusters import detect_clusters
from linkopt.scoring.preview import preview_recommendations, rank_by_preview_score
from linkopt.scoring.scorer import PageScorer
from linkopt.scoring.utils import round_half_up

pages_app = typer.Typer(help="Search, inspect and preview pages.", no_args_is_help=True)


def _data_option():
    return typer.Option(None, "--data", "-d", help="Crawl export CSV (defaults to LINKOPT_DATA_FILE).")


@pages_app.command("search")
@exit_on_error
def pages_search(
    query: str = typer.Argument("", help="Text to match in title, URL or description."),
    tier: Optional[str] = typer.Option(None, "--tier", help="Only pages in this tier: money | supporting | traffic."),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Maximum number of results."),
    data: Optional[Path] = _data_option(),
) -> None:
    """Search pages by keyword, highest ILR first."""
    store = load_store(data, KEYWORD_POLICY)
    if limit is None:
        limit = settings.search_limit if query.strip() else settings.search_all_limit

    results = store.search_pages(query, tier=tier, limit=limit)
    if not results:
        typer.echo(f"No pages match {query!r}.")
        return

    typer.echo(f"{len(results)} page(s):")
    for page in results:
        typer.echo(f"  [{page.tier}] {page.title}  ILR {page.ilr:g}  {page.url}")


@pages_app.command("show")
@exit_on_error
def pages_show(
    url: str = typer.Argument(..., help="Exact page URL."),
    data: Optional[Path] = _data_option(),
) -> None:
    """Show the full score breakdown and recommendations for one page."""
    store = load_store(data)
    page = store.get_page_by_url(url)
    if page is None:
        typer.echo(f"Page not found: {url}")
        raise typer.Exit(code=1)

    clusters = detect_clusters(store.pages)
    scored = PageScorer(clusters).score(page)
    b = scored.breakdown

    typer.secho(page.title or page.url, bold=True)
    typer.echo(f"URL: {page.url}")
    typer.echo(f"Tier: {page.tier}  Type: {page.page_type}")
    typer.echo(
        f"ILR: {page.ilr:g}  Incoming: {page.incoming_links}  Outgoing: {page.outgoing_links}  "
        f"Depth: {page.crawl_depth}  Status: {page.http_status}  Load: {page.load_time:g}s"
    )
    for cluster in clusters:
        if cluster.contains(page.url):
            role = "hub" if cluster.is_hub(page.url) else "spoke"
            typer.echo(f"Cluster: {cluster.name} ({role})")
    typer.echo("")
    typer.echo(
        "Score: "
        + typer.style(f"{scored.total}/100 ({scored.grade})", fg=score_colour(scored.total), bold=True)
    )
    typer.echo(f"  Link:      {b.link_score}")
    typer.echo(f"  Tier:      {b.tier_score}")
    typer.echo(f"  Technical: {b.technical_score}")
    typer.echo(f"  Content:   {b.content_score}")
    typer.echo(f"  Cluster:   {b.cluster_score}")

    typer.echo("")
    if not scored.recommendations:
        typer.echo("No recommendations.")
        return
    typer.echo("Recommendations:")
    for rec in scored.recommendations:
        typer.echo(f"  [{priority_label(rec.priority)}] {rec.action}")


@pages_app.command("preview")
@exit_on_error
def pages_preview(
    goal: str = typer.Option("balanced", "--goal", help="conversions | traffic | authority | balanced"),
    limit: int = typer.Option(10, "--limit", "-n", help="Number of pages to list."),
    data: Optional[Path] = _data_option(),
) -> None:
    """List pages ranked by their quick preview score."""
    if goal not in PRIMARY_GOALS:
        raise PreferencesError(f"Unknown goal {goal!r}; choose one of: {', '.join(PRIMARY_GOALS)}")

    store = load_store(data, KEYWORD_POLICY)
    ranked = rank_by_preview_score(store.search_pages(""), goal, limit)
    if not ranked:
        typer.echo("No pages to preview.")
        return

    for page, raw_score in ranked:
        score = round_half_up(raw_score)
        typer.echo(f"{score:>3}  [{page.tier}] {page.title}")
        for rec in preview_recommendations(page):
            typer.echo(f"       - {rec}")
