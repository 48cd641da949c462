"""Utilities for rendering clusters and run summaries in the CLI."""

from __future__ import annotations

from typing import List, Sequence

import typer

from linkopt.data.models import PageRecord, SiteAnalysis, TierPartition, TopicCluster
from linkopt.data.preferences import BusinessPreferences
from linkopt.reports.console import priority_label, score_colour


def _page_label(page: PageRecord) -> str:
    return f"{page.title or page.url} (ILR {page.ilr:g})"


def render_cluster_tree(clusters: Sequence[TopicCluster]) -> str:
    """Render topic clusters as an ASCII tree.

    Each cluster is a root line, its hub the single child and the spokes
    hang off the hub::

        Commercial Cleaning Services [service-cluster]
        └── [hub] Office Cleaning (ILR 98)
            ├── [spoke] Warehouse Cleaning (ILR 96)
            └── [spoke] Retail Cleaning (ILR 95)
    """
    if not clusters:
        return "No topic clusters detected."

    lines: List[str] = []
    for index, cluster in enumerate(clusters):
        if index:
            lines.append("")
        lines.append(f"{cluster.name} [{cluster.type}]")
        lines.append(f"└── [hub] {_page_label(cluster.hub)}")
        count = len(cluster.spokes)
        for i, spoke in enumerate(cluster.spokes):
            connector = "└── " if i == count - 1 else "├── "
            lines.append(f"    {connector}[spoke] {_page_label(spoke)}")
    return "\n".join(lines)


def processing_summary(partition: TierPartition, orphaned: int) -> List[str]:
    counts = partition.counts()
    return [
        typer.style(f"Processed {len(partition)} pages", fg=typer.colors.GREEN),
        f"   - Money Pages: {counts['money']}",
        f"   - Supporting Pages: {counts['supporting']}",
        f"   - Traffic Pages: {counts['traffic']}",
        f"   - Orphaned Pages: {orphaned}",
    ]


def optimization_summary(analysis: SiteAnalysis, preferences: BusinessPreferences) -> List[str]:
    overall = analysis.overall
    rule = typer.style("-" * 50, fg=typer.colors.CYAN)
    lines = [
        "",
        typer.style("OPTIMIZATION SUMMARY", fg=typer.colors.CYAN, bold=True),
        rule,
        "Overall Score: "
        + typer.style(f"{overall.score}/100 ({overall.grade})", fg=score_colour(overall.score), bold=True),
        f"Pages Analyzed: {overall.total_pages}",
        "",
        "Top Opportunities:",
    ]
    for i, opp in enumerate(analysis.opportunities[:3], start=1):
        lines.append(f"  {i}. [{priority_label(opp.priority)}] {opp.issue}")
    if not analysis.opportunities:
        lines.append("  None found.")

    steps = [
        "Review the detailed reports generated",
        "Start with high-priority opportunities",
        "Monitor progress using your selected tools",
    ]
    if preferences.create_action_plan:
        steps.append("Follow the implementation timeline in your action plan")
    lines += ["", "Recommended Next Steps:"]
    lines += [f"  {i}. {step}" for i, step in enumerate(steps, start=1)]
    lines.append(rule)
    return lines
