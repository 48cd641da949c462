"""Render the requested report formats and write them to disk."""

from __future__ import annotations

import logging
import webbrowser
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, Optional

from linkopt.config import settings
from linkopt.data.models import SiteAnalysis
from linkopt.data.preferences import BusinessPreferences
from linkopt.reports.console import render_console_report
from linkopt.reports.csv_report import render_csv_report
from linkopt.reports.html import render_html_report
from linkopt.reports.markdown import render_markdown_report

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H-%M-%S"

_FILENAMES = {
    "markdown": "internal-linking-report-{ts}.md",
    "html": "internal-linking-report-{ts}.html",
    "csv": "internal-linking-data-{ts}.csv",
}


@dataclass
class ReportFile:
    """One rendered report.  ``path`` is None for console output."""

    format: str
    content: str
    path: Optional[Path] = None


def report_filename(fmt: str, generated_at: datetime) -> str:
    return _FILENAMES[fmt].format(ts=generated_at.strftime(TIMESTAMP_FORMAT))


def render_report(
    fmt: str,
    analysis: SiteAnalysis,
    preferences: BusinessPreferences,
    generated_at: datetime,
) -> str:
    if fmt == "console":
        return render_console_report(analysis, preferences, generated_at)
    if fmt == "markdown":
        return render_markdown_report(analysis, preferences, generated_at)
    if fmt == "html":
        return render_html_report(analysis, preferences, generated_at)
    if fmt == "csv":
        return render_csv_report(analysis)
    raise ValueError(f"Unknown report format: {fmt!r}")


def generate_reports(
    analysis: SiteAnalysis,
    preferences: BusinessPreferences,
    reports_dir: Optional[Path] = None,
    generated_at: Optional[datetime] = None,
    formats: Optional[Iterable[str]] = None,
) -> Dict[str, ReportFile]:
    """Render every format in ``preferences.output_formats``.

    File formats are written under ``reports_dir`` (the configured reports
    directory by default, created on demand); console output is returned
    without touching the filesystem.
    """
    generated_at = generated_at or datetime.now()
    formats = list(formats if formats is not None else preferences.output_formats)

    out_dir: Optional[Path] = None
    results: Dict[str, ReportFile] = {}
    for fmt in dict.fromkeys(formats):
        content = render_report(fmt, analysis, preferences, generated_at)
        if fmt == "console":
            results[fmt] = ReportFile(format=fmt, content=content)
            continue

        if out_dir is None:
            if reports_dir is None:
                out_dir = settings.ensure_reports_dir()
            else:
                out_dir = Path(reports_dir)
                out_dir.mkdir(parents=True, exist_ok=True)
        path = out_dir / report_filename(fmt, generated_at)
        path.write_text(content, encoding="utf-8")
        logger.info("Wrote %s report to %s", fmt, path)
        results[fmt] = ReportFile(format=fmt, content=content, path=path)

    return results


def open_html_report(path: Path) -> bool:
    """Open a written HTML report in the default browser."""
    url = Path(path).resolve().as_uri()
    opened = webbrowser.open(url)
    if not opened:
        logger.warning("Could not open a browser for %s", url)
    return opened
