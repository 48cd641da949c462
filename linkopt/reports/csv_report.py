"""Per-page CSV export for spreadsheet analysis."""

from __future__ import annotations

import csv
import io

from linkopt.data.models import SiteAnalysis

CSV_HEADERS = [
    "Page URL",
    "Page Title",
    "Tier",
    "ILR Score",
    "Incoming Links",
    "Outgoing Links",
    "Optimization Score",
    "Grade",
    "Load Time",
    "Issues",
    "Top Recommendation",
]

NO_RECOMMENDATION = "No specific recommendation"


def render_csv_report(analysis: SiteAnalysis) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for scored in analysis.page_scores:
        page = scored.page
        top = scored.recommendations[0].action if scored.recommendations else NO_RECOMMENDATION
        writer.writerow([
            page.url,
            page.title,
            page.tier or "",
            page.ilr,
            page.incoming_links,
            page.outgoing_links,
            scored.total,
            scored.grade,
            page.load_time,
            page.issues,
            top,
        ])
    return buf.getvalue()
