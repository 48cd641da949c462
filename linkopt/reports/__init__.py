"""Report renderers (console, Markdown, HTML, CSV) and the file writer.

Public re-exports so callers can write::

    from linkopt.reports import generate_reports, open_html_report
"""

from linkopt.reports.console import render_console_report
from linkopt.reports.csv_report import render_csv_report
from linkopt.reports.html import render_html_report
from linkopt.reports.markdown import render_markdown_report
from linkopt.reports.writer import ReportFile, generate_reports, open_html_report

__all__ = [
    "ReportFile",
    "generate_reports",
    "open_html_report",
    "render_console_report",
    "render_csv_report",
    "render_html_report",
    "render_markdown_report",
]
