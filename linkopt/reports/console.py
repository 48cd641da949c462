"""Terminal report card.

Colour comes from ``typer.style`` so the output degrades to plain text when
styles are stripped (``typer.echo`` does that automatically off a TTY).
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

import typer

from linkopt.data.models import SiteAnalysis
from linkopt.data.preferences import BusinessPreferences
from linkopt.scoring.constants import ACTION_PLAN_TIMEFRAMES

_STATUS_MARKERS = {"good": "[ok]", "too-few": "[low]", "too-many": "[high]"}
_TIER_LABELS = {"money": "Money Pages", "supporting": "Supporting Pages", "traffic": "Traffic Pages"}


def score_colour(score: float) -> str:
    if score >= 80:
        return typer.colors.GREEN
    if score >= 60:
        return typer.colors.YELLOW
    return typer.colors.RED


def priority_label(priority: str) -> str:
    colours = {"high": typer.colors.RED, "medium": typer.colors.YELLOW}
    return typer.style(priority.upper(), fg=colours.get(priority, typer.colors.GREEN))


def _heading(text: str) -> str:
    return typer.style(text, fg=typer.colors.CYAN, bold=True)


def _header(generated_at: datetime) -> List[str]:
    bar = "=" * 62
    return [
        typer.style(bar, fg=typer.colors.BLUE, bold=True),
        typer.style("INTERNAL LINKING REPORT CARD".center(62), fg=typer.colors.BLUE, bold=True),
        typer.style(f"Generated: {generated_at:%Y-%m-%d %H:%M}".center(62), fg=typer.colors.BLUE),
        typer.style(bar, fg=typer.colors.BLUE, bold=True),
        "",
    ]


def _score_card(analysis: SiteAnalysis) -> List[str]:
    overall = analysis.overall
    stars = "*" * -(-overall.score // 20)
    lines = [
        _heading("OVERALL SITE SCORE"),
        typer.style(
            f"Score: {overall.score}/100 {stars} (Grade: {overall.grade})",
            fg=score_colour(overall.score), bold=True,
        ),
        f"Total Pages Analyzed: {overall.total_pages}",
        "",
        _heading("TIER DISTRIBUTION"),
    ]
    for tier, dist in analysis.distribution.items():
        lines.append(
            f"- {_TIER_LABELS[tier]}: {dist.count} ({dist.percentage}%) - "
            f"{_STATUS_MARKERS.get(dist.status, '')} {dist.status} (ideal {dist.ideal})"
        )
    return lines + [""]


def _tier_analysis(analysis: SiteAnalysis) -> List[str]:
    a = analysis.analytics
    lines = [_heading("TIER PERFORMANCE ANALYSIS")]
    for tier, score in analysis.tier_scores.items():
        lines.append(f"- {_TIER_LABELS[tier]} Average Score: {score}/100")
    flow = analysis.link_equity_flow
    lines += [
        "",
        _heading("KEY METRICS"),
        f"- Average ILR: {a.averages['ilr']}",
        f"- Average Incoming Links: {a.averages['incoming_links']}",
        f"- Orphaned Pages: {a.orphaned_pages}",
        f"- High Performers (ILR >= 90): {a.high_performing_pages}",
        f"- Under Performers (ILR < 50): {a.low_performing_pages}",
        f"- Link Equity Flow: {flow.score}/100 ({flow.status})",
        "",
    ]
    return lines


def _opportunities(analysis: SiteAnalysis, limit: int = 5) -> List[str]:
    lines = [_heading("TOP OPTIMIZATION OPPORTUNITIES")]
    for i, opp in enumerate(analysis.opportunities[:limit], start=1):
        lines += [
            f"{i}. [{priority_label(opp.priority)}] {opp.issue}",
            typer.style(f"   -> {opp.recommendation}", dim=True),
            typer.style(f"   {opp.impact}", dim=True),
            "",
        ]
    if not analysis.opportunities:
        lines += ["No opportunities found.", ""]
    return lines


def _recommendations(analysis: SiteAnalysis, limit: int = 3) -> List[str]:
    lines = [_heading("STRATEGIC RECOMMENDATIONS")]
    for i, rec in enumerate(analysis.recommendations[:limit], start=1):
        lines += [
            f"{i}. [{priority_label(rec.priority)}] {rec.title}",
            typer.style(f"   {rec.action}", dim=True),
            typer.style(f"   {rec.impact}", dim=True),
            "",
        ]
    return lines


def _performers(analysis: SiteAnalysis, limit: int = 5) -> List[str]:
    top = analysis.page_scores[:limit]
    bottom = list(reversed(analysis.page_scores[-limit:])) if analysis.page_scores else []

    lines = [_heading("TOP PERFORMING PAGES")]
    for i, scored in enumerate(top, start=1):
        result = typer.style(f"{scored.total}/100 ({scored.grade})", fg=score_colour(scored.total))
        lines.append(f"{i}. {scored.page.title or 'Unknown'} - {result}")

    lines += ["", _heading("PAGES NEEDING ATTENTION")]
    for i, scored in enumerate(bottom, start=1):
        result = typer.style(f"{scored.total}/100 ({scored.grade})", fg=score_colour(scored.total))
        lines.append(f"{i}. {scored.page.title or 'Unknown'} - {result}")
    return lines + [""]


def _phase(text: str) -> str:
    return typer.style(text, fg=typer.colors.YELLOW, bold=True)


def _action_plan(preferences: BusinessPreferences) -> List[str]:
    plan = ACTION_PLAN_TIMEFRAMES[preferences.timeline]
    return [
        _heading("IMPLEMENTATION ACTION PLAN"),
        f"Timeline: {preferences.timeline} ({plan['weeks']} weeks)",
        f"Recommended Tasks Per Week: {plan['tasks_per_week']}",
        "",
        _phase("WEEK 1-2: QUICK WINS"),
        "- Fix orphaned pages with 0-2 internal links",
        "- Add internal links to top money pages",
        "- Fix technical issues (404s, slow loading)",
        "",
        _phase("WEEK 3-4: CONTENT OPTIMIZATION"),
        "- Optimize supporting page internal links",
        "- Create topic cluster connections",
        "- Improve anchor text strategy",
        "",
        _phase("ONGOING: MONITORING & REFINEMENT"),
        "- Track ILR improvements weekly",
        "- Monitor traffic and conversion impacts",
        "- Adjust strategy based on results",
        "",
    ]


def render_console_report(
    analysis: SiteAnalysis,
    preferences: BusinessPreferences,
    generated_at: Optional[datetime] = None,
) -> str:
    lines = _header(generated_at or datetime.now())
    lines += _score_card(analysis)
    lines += _tier_analysis(analysis)
    lines += _opportunities(analysis)
    lines += _recommendations(analysis)
    lines += _performers(analysis)
    if preferences.create_action_plan:
        lines += _action_plan(preferences)
    return "\n".join(lines)
