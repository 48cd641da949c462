"""Markdown report."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from linkopt.data.models import SiteAnalysis
from linkopt.data.preferences import BusinessPreferences

_TIER_LABELS = {"money": "Money Pages", "supporting": "Supporting Pages", "traffic": "Traffic Pages"}


def _md_link(title: str, url: str) -> str:
    label = (title or url).replace("[", "\\[").replace("]", "\\]")
    return f"[{label}]({url})"


def _summary(analysis: SiteAnalysis) -> List[str]:
    overall = analysis.overall
    a = analysis.analytics
    lines = [
        "## Executive Summary",
        "",
        f"### Overall Site Score: {overall.score}/100 ({overall.grade})",
        "",
        "Your website has been analyzed for internal linking optimization "
        f"opportunities. Based on {overall.total_pages} pages analyzed, here "
        "are the key findings:",
        "",
        "**Tier Distribution:**",
    ]
    for tier, dist in analysis.distribution.items():
        lines.append(
            f"- {_TIER_LABELS[tier]}: {dist.count} pages ({dist.percentage}%) - "
            f"Status: {dist.status} (ideal {dist.ideal}), "
            f"Average Score: {analysis.tier_scores[tier]}/100"
        )
    lines += [
        "",
        "**Key Metrics:**",
        f"- Average ILR Score: {a.averages['ilr']}",
        f"- Average Incoming Links: {a.averages['incoming_links']}",
        f"- Average Load Time: {a.averages['load_time']}s",
        f"- Orphaned Pages: {a.orphaned_pages}",
        f"- High Performers (ILR >= 90): {a.high_performing_pages}",
        f"- Under Performers (ILR < 50): {a.low_performing_pages}",
        f"- Link Equity Flow: {analysis.link_equity_flow.score}/100 "
        f"({analysis.link_equity_flow.status})",
        "",
    ]
    return lines


def _opportunities(analysis: SiteAnalysis) -> List[str]:
    lines = ["## Top Optimization Opportunities", ""]
    for i, opp in enumerate(analysis.opportunities[:10], start=1):
        lines += [
            f"### {i}. {opp.issue} [{opp.priority.upper()} Priority]",
            "",
            f"**Recommendation:** {opp.recommendation}",
            "",
            f"**Impact:** {opp.impact}",
            "",
        ]
        if opp.page is not None:
            lines += [f"**Affected Page:** {_md_link(opp.page.title, opp.page.url)}", ""]
    if not analysis.opportunities:
        lines += ["No optimization opportunities were found.", ""]
    return lines


def _recommendations(analysis: SiteAnalysis) -> List[str]:
    lines = ["## Strategic Recommendations", ""]
    for i, rec in enumerate(analysis.recommendations[:5], start=1):
        lines += [
            f"### {i}. {rec.title} [{rec.priority.upper()} Priority]",
            "",
            f"**Action:** {rec.action}",
            "",
            f"**Impact:** {rec.impact}",
            "",
            f"**Category:** {rec.category}",
            "",
        ]
    return lines


def _performance(analysis: SiteAnalysis) -> List[str]:
    lines = ["## Page Performance Analysis", "", "### Top Performing Pages", ""]
    for i, s in enumerate(analysis.page_scores[:10], start=1):
        lines += [
            f"{i}. **{s.page.title or 'Unknown'}** - Score: {s.total}/100 ({s.grade})",
            f"   - Link Score: {s.breakdown.link_score}/100",
            f"   - Technical Score: {s.breakdown.technical_score}/100",
            f"   - Content Score: {s.breakdown.content_score}/100",
        ]
    lines += ["", "### Pages Needing Attention", ""]
    bottom = list(reversed(analysis.page_scores[-10:])) if analysis.page_scores else []
    for i, s in enumerate(bottom, start=1):
        issues = ", ".join(r.action for r in s.recommendations[:2]) or "None"
        lines += [
            f"{i}. **{s.page.title or 'Unknown'}** - Score: {s.total}/100 ({s.grade})",
            f"   - Primary Issues: {issues}",
        ]
    return lines + [""]


def _clusters(analysis: SiteAnalysis) -> List[str]:
    if not analysis.clusters:
        return []
    lines = ["## Topic Clusters", ""]
    for cluster in analysis.clusters:
        lines.append(f"### {cluster.name} ({cluster.type})")
        lines.append("")
        lines.append(f"- Hub: {_md_link(cluster.hub.title, cluster.hub.url)}")
        for spoke in cluster.spokes:
            lines.append(f"  - Spoke: {_md_link(spoke.title, spoke.url)}")
        lines.append("")
    return lines


def _timeline(analysis: SiteAnalysis, preferences: BusinessPreferences) -> List[str]:
    return [
        "## Implementation Timeline",
        "",
        f"Based on your selected timeline ({preferences.timeline}), here's a "
        "recommended implementation plan:",
        "",
        "### Phase 1: Quick Wins (Weeks 1-2)",
        f"- Fix {analysis.analytics.orphaned_pages} orphaned pages",
        "- Add internal links to top money pages",
        "- Resolve technical issues",
        "",
        "### Phase 2: Content Optimization (Weeks 3-8)",
        "- Optimize supporting page internal links",
        "- Create topic cluster connections",
        "- Improve anchor text strategy",
        "",
        "### Phase 3: Advanced Optimization (Weeks 9-12)",
        "- Implement advanced linking strategies",
        "- Monitor and adjust based on performance",
        "- Scale successful tactics",
        "",
    ]


def _monitoring(preferences: BusinessPreferences) -> List[str]:
    lines = [
        "## Monitoring & Next Steps",
        "",
        "### Key Metrics to Track",
        "1. **Internal Link Ratio (ILR)** improvements",
        "2. **Organic traffic** changes to optimized pages",
        "3. **Conversion rates** on money pages",
        "4. **Page authority** improvements",
        "",
        "### Tools Integration",
    ]
    if preferences.monitoring_tools:
        lines.append(f"Current Tools: {', '.join(preferences.monitoring_tools)}")
    lines += ["", "### WordPress Integration"]
    if preferences.wordpress_integration == "yes":
        lines.append(f"Recommended Plugin: {preferences.wordpress_plugin or 'Link Whisper'}")
        lines.append(f"Implementation: {preferences.link_management or 'manual'}")
    else:
        lines.append("Manual implementation recommended")
    return lines + [""]


def render_markdown_report(
    analysis: SiteAnalysis,
    preferences: BusinessPreferences,
    generated_at: Optional[datetime] = None,
) -> str:
    generated_at = generated_at or datetime.now()
    lines = [
        "# Internal Linking Optimization Report",
        "",
        f"Generated: {generated_at:%Y-%m-%d %H:%M}",
        "Analysis Tool: Internal Linking Optimization CLI",
        "",
        "---",
        "",
    ]
    lines += _summary(analysis) + ["---", ""]
    lines += _opportunities(analysis) + ["---", ""]
    lines += _recommendations(analysis) + ["---", ""]
    lines += _performance(analysis)
    lines += _clusters(analysis)
    lines += ["---", ""]
    if preferences.report_detail != "summary" or preferences.create_action_plan:
        lines += _timeline(analysis, preferences) + ["---", ""]
    lines += _monitoring(preferences)
    lines += ["---", "", "*Report generated by Internal Linking Optimization Tool*", ""]
    return "\n".join(lines)
