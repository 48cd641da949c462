"""Self-contained HTML report.

Every value that comes from the crawl export (titles, URLs, descriptions)
is passed through :func:`html.escape` before interpolation.
"""

from __future__ import annotations

from datetime import datetime
from html import escape
from typing import List, Optional

from linkopt.data.models import ScoredPage, SiteAnalysis
from linkopt.data.preferences import BusinessPreferences

GREEN = "#28a745"
YELLOW = "#ffc107"
RED = "#dc3545"

_STATUS_TEXT = {
    "good": "Optimal Distribution",
    "too-few": "Need More Pages",
    "too-many": "Too Many Pages",
}
_TIER_HEADINGS = {
    "money": "Money Pages",
    "supporting": "Supporting Pages",
    "traffic": "Traffic Pages",
}

_STYLE = """
* { margin: 0; padding: 0; box-sizing: border-box; }
body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
       line-height: 1.6; color: #333;
       background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); min-height: 100vh; }
.container { max-width: 1200px; margin: 0 auto; padding: 20px; }
.report-card { background: white; border-radius: 20px; box-shadow: 0 20px 40px rgba(0,0,0,0.1);
               overflow: hidden; margin-bottom: 30px; }
.header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white;
          padding: 40px; text-align: center; }
.header h1 { font-size: 2.5em; margin-bottom: 10px; }
.score-section { padding: 40px; text-align: center; background: #f8f9fa; }
.overall-score { display: inline-flex; flex-direction: column; align-items: center;
                 justify-content: center; color: white; padding: 30px; border-radius: 10px;
                 font-size: 3em; font-weight: bold; min-width: 150px; min-height: 150px;
                 margin-bottom: 20px; }
.grade { font-size: 0.4em; margin-top: 10px; }
.metrics-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(250px, 1fr));
                gap: 20px; padding: 40px; }
.metric-card { background: white; padding: 25px; border-radius: 15px; text-align: center;
               box-shadow: 0 5px 15px rgba(0,0,0,0.08); border-left: 5px solid #667eea; }
.metric-card h3 { color: #667eea; margin-bottom: 15px; font-size: 1.1em; }
.metric-value { font-size: 2.5em; font-weight: bold; }
.metric-label { color: #666; font-size: 0.9em; }
.section { padding: 40px; }
.section-title { font-size: 2em; margin-bottom: 30px; text-align: center; }
.tier-card, .item { background: #f8f9fa; padding: 25px; border-radius: 15px;
                    margin-bottom: 20px; border-left: 5px solid; }
.tier-money { border-left-color: #28a745; }
.tier-supporting { border-left-color: #ffc107; }
.tier-traffic { border-left-color: #17a2b8; }
.priority-high { border-left-color: #dc3545; }
.priority-medium { border-left-color: #ffc107; }
.priority-low { border-left-color: #28a745; }
.badge { display: inline-block; padding: 5px 12px; border-radius: 20px; font-size: 0.8em;
         font-weight: bold; text-transform: uppercase; margin-bottom: 10px; color: white; }
.badge-high { background: #dc3545; }
.badge-medium { background: #ffc107; color: #333; }
.badge-low { background: #28a745; }
.performers-grid { display: grid; grid-template-columns: 1fr 1fr; gap: 30px; }
.performer-list { background: #f8f9fa; padding: 25px; border-radius: 15px; }
.performer-item { display: flex; justify-content: space-between; align-items: center;
                  padding: 15px 0; border-bottom: 1px solid #dee2e6; }
.performer-item:last-child { border-bottom: none; }
.performer-score { font-weight: bold; padding: 5px 10px; border-radius: 10px; color: white; }
.phase { background: white; padding: 25px; border-radius: 15px; margin-bottom: 20px;
         box-shadow: 0 5px 15px rgba(0,0,0,0.08); }
.phase-title { color: #667eea; font-size: 1.3em; font-weight: bold; margin-bottom: 15px; }
.footer { text-align: center; padding: 40px; background: #333; color: white; }
@media (max-width: 768px) {
  .performers-grid, .metrics-grid { grid-template-columns: 1fr; }
}
"""


def score_color(score: float) -> str:
    if score >= 80:
        return GREEN
    if score >= 60:
        return YELLOW
    return RED


def _truncate(text: str, length: int = 40) -> str:
    return text if len(text) <= length else text[:length] + "..."


def _metrics(analysis: SiteAnalysis) -> str:
    a = analysis.analytics
    cards = [
        ("Average ILR", a.averages["ilr"], "Internal Link Ratio"),
        ("Avg Links", a.averages["incoming_links"], "Incoming Internal Links"),
        ("Orphaned Pages", a.orphaned_pages, "Pages with &le;2 links"),
        ("Avg Load Time", f"{a.averages['load_time']}s", "Page Load Speed"),
        ("Link Equity Flow", analysis.link_equity_flow.score,
         escape(analysis.link_equity_flow.status)),
    ]
    body = "".join(
        f'<div class="metric-card"><h3>{title}</h3>'
        f'<div class="metric-value">{value}</div>'
        f'<div class="metric-label">{label}</div></div>'
        for title, value, label in cards
    )
    return f'<div class="report-card"><div class="metrics-grid">{body}</div></div>'


def _tiers(analysis: SiteAnalysis) -> str:
    cards = []
    for tier, dist in analysis.distribution.items():
        cards.append(
            f'<div class="tier-card tier-{tier}">'
            f"<h3>{_TIER_HEADINGS[tier]} ({dist.percentage}%)</h3>"
            f"<p><strong>{dist.count} pages</strong> - Average Score: "
            f"{analysis.tier_scores[tier]}/100</p>"
            f"<p>Status: {_STATUS_TEXT.get(dist.status, 'Unknown Status')} "
            f"(Ideal: {dist.ideal})</p></div>"
        )
    return (
        '<div class="report-card"><div class="section">'
        '<h2 class="section-title">Tier Distribution Analysis</h2>'
        + "".join(cards)
        + "</div></div>"
    )


def _items(title: str, entries: List[str]) -> str:
    return (
        '<div class="report-card"><div class="section">'
        f'<h2 class="section-title">{title}</h2>'
        + ("".join(entries) or "<p>Nothing to report.</p>")
        + "</div></div>"
    )


def _item(priority: str, heading: str, label: str, text: str, impact: str) -> str:
    p = escape(priority)
    return (
        f'<div class="item priority-{p}">'
        f'<div class="badge badge-{p}">{p} Priority</div>'
        f"<h3>{escape(heading)}</h3>"
        f"<p><strong>{label}:</strong> {escape(text)}</p>"
        f"<p><strong>Impact:</strong> {escape(impact)}</p></div>"
    )


def _performer_rows(scores: List[ScoredPage]) -> str:
    return "".join(
        '<div class="performer-item">'
        f'<div class="performer-name">{escape(_truncate(s.page.title or "Unknown"))}</div>'
        f'<div class="performer-score" style="background: {score_color(s.total)}">{s.total}</div>'
        "</div>"
        for s in scores
    )


def _performers(analysis: SiteAnalysis) -> str:
    top = analysis.page_scores[:8]
    bottom = list(reversed(analysis.page_scores[-8:])) if analysis.page_scores else []
    return (
        '<div class="report-card"><div class="section">'
        '<h2 class="section-title">Page Performance Analysis</h2>'
        '<div class="performers-grid">'
        f'<div class="performer-list"><h3>Top Performers</h3>{_performer_rows(top)}</div>'
        f'<div class="performer-list"><h3>Needs Attention</h3>{_performer_rows(bottom)}</div>'
        "</div></div></div>"
    )


def _action_plan(analysis: SiteAnalysis, preferences: BusinessPreferences) -> str:
    phases = [
        ("Phase 1: Quick Wins (Weeks 1-2)", [
            f"Fix {analysis.analytics.orphaned_pages} orphaned pages with minimal internal links",
            "Add strategic internal links to top money pages",
            "Resolve technical issues (404s, slow loading pages)",
            "Optimize highest-impact pages first",
        ]),
        ("Phase 2: Content Optimization (Weeks 3-8)", [
            "Optimize supporting page internal link structure",
            "Create topic cluster connections",
            "Improve anchor text strategy and diversity",
            "Balance link distribution across tiers",
        ]),
        ("Phase 3: Advanced Optimization (Weeks 9+)", [
            "Implement advanced linking strategies",
            "Monitor and adjust based on performance data",
            "Scale successful tactics across the site",
            "Continuous optimization and refinement",
        ]),
    ]
    body = "".join(
        f'<div class="phase"><div class="phase-title">{title}</div><ul>'
        + "".join(f"<li>{task}</li>" for task in tasks)
        + "</ul></div>"
        for title, tasks in phases
    )
    return (
        '<div class="report-card"><div class="section">'
        '<h2 class="section-title">Implementation Action Plan</h2>'
        f"<p>Timeline: <strong>{escape(preferences.timeline)}</strong> approach</p>"
        f"{body}</div></div>"
    )


def render_html_report(
    analysis: SiteAnalysis,
    preferences: BusinessPreferences,
    generated_at: Optional[datetime] = None,
) -> str:
    generated_at = generated_at or datetime.now()
    overall = analysis.overall

    opportunities = [
        _item(o.priority, o.issue, "Recommendation", o.recommendation, o.impact)
        for o in analysis.opportunities[:8]
    ]
    recommendations = [
        _item(r.priority, r.title, "Action", r.action, r.impact)
        for r in analysis.recommendations[:5]
    ]

    sections = [
        '<div class="report-card">'
        '<div class="header"><h1>Internal Linking Report</h1>'
        f'<div class="subtitle">Generated: {generated_at:%Y-%m-%d %H:%M}</div></div>'
        '<div class="score-section">'
        f'<div class="overall-score" style="background: {score_color(overall.score)}">'
        f'<div>{overall.score}</div><div class="grade">{escape(overall.grade)}</div></div>'
        "<h2>Overall Optimization Score</h2>"
        f"<p>Based on analysis of {overall.total_pages} pages</p></div></div>",
        _metrics(analysis),
        _tiers(analysis),
        _items("Top Optimization Opportunities", opportunities),
        _items("Strategic Recommendations", recommendations),
        _performers(analysis),
    ]
    if preferences.create_action_plan:
        sections.append(_action_plan(analysis, preferences))

    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n<head>\n<meta charset="UTF-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        "<title>Internal Linking Optimization Report</title>\n"
        f"<style>{_STYLE}</style>\n</head>\n<body>\n<div class=\"container\">\n"
        + "\n".join(sections)
        + '\n<div class="footer"><p>Report generated by Internal Linking Optimization Tool</p></div>'
        "\n</div>\n</body>\n</html>\n"
    )
