"""Shared fixtures: page factory and crawl-export CSV writer."""

from __future__ import annotations

import csv
from dataclasses import replace

import pytest

from linkopt.data.loader import extract_slug
from linkopt.data.models import PageRecord

CSV_COLUMNS = [
    "Page URL",
    "Page Title",
    "ILR",
    "Raw ILR",
    "Incoming Internal Links",
    "Outgoing Internal Links",
    "Crawl Depth",
    "HTTP Status Code",
    "Page (HTML) Load Time, sec",
    "In sitemap",
    "Issues",
    "Description",
]

LONG_DESCRIPTION = (
    "Professional commercial cleaning for offices, banks and medical facilities "
    "with flexible schedules and trained, insured staff."
)

# A small but realistic crawl export: three service pages, one supporting
# page and two blog posts (one of them orphaned).
SAMPLE_ROWS = [
    {
        "Page URL": "https://nae.example/office-building-cleaning/",
        "Page Title": "Office Building Cleaning Services in Town",
        "ILR": "98", "Raw ILR": "0.98",
        "Incoming Internal Links": "60", "Outgoing Internal Links": "15",
        "Crawl Depth": "1", "HTTP Status Code": "200",
        "Page (HTML) Load Time, sec": "0.8", "In sitemap": "1", "Issues": "0",
        "Description": LONG_DESCRIPTION,
    },
    {
        "Page URL": "https://nae.example/bank-cleaning/",
        "Page Title": "Bank Cleaning Services",
        "ILR": "96", "Raw ILR": "0.96",
        "Incoming Internal Links": "55", "Outgoing Internal Links": "14",
        "Crawl Depth": "1", "HTTP Status Code": "200",
        "Page (HTML) Load Time, sec": "1.1", "In sitemap": "1", "Issues": "0",
        "Description": LONG_DESCRIPTION,
    },
    {
        "Page URL": "https://nae.example/medical-facility-cleaning/",
        "Page Title": "Medical Facility Cleaning",
        "ILR": "99", "Raw ILR": "0.99",
        "Incoming Internal Links": "70", "Outgoing Internal Links": "16",
        "Crawl Depth": "1", "HTTP Status Code": "200",
        "Page (HTML) Load Time, sec": "0.9", "In sitemap": "1", "Issues": "0",
        "Description": LONG_DESCRIPTION,
    },
    {
        "Page URL": "https://nae.example/about-us/",
        "Page Title": "About Our Company",
        "ILR": "80", "Raw ILR": "0.80",
        "Incoming Internal Links": "40", "Outgoing Internal Links": "25",
        "Crawl Depth": "1", "HTTP Status Code": "200",
        "Page (HTML) Load Time, sec": "1.0", "In sitemap": "1", "Issues": "0",
        "Description": "Who we are.",
    },
    {
        "Page URL": "https://nae.example/blog/office-cleaning-tips/",
        "Page Title": "Office Cleaning Tips for Busy Managers",
        "ILR": "45", "Raw ILR": "0.45",
        "Incoming Internal Links": "8", "Outgoing Internal Links": "30",
        "Crawl Depth": "2", "HTTP Status Code": "200",
        "Page (HTML) Load Time, sec": "2.0", "In sitemap": "1", "Issues": "1",
        "Description": "Tips.",
    },
    {
        "Page URL": "https://nae.example/recent-blog/spring-guide/",
        "Page Title": "Spring Cleaning Guide",
        "ILR": "20", "Raw ILR": "0.20",
        "Incoming Internal Links": "1", "Outgoing Internal Links": "12",
        "Crawl Depth": "3", "HTTP Status Code": "200",
        "Page (HTML) Load Time, sec": "4.0", "In sitemap": "0", "Issues": "3",
        "Description": "",
    },
]


def make_page(url: str = "https://nae.example/some-page/", **fields) -> PageRecord:
    """Build a PageRecord with sensible healthy defaults."""
    base = PageRecord(
        url=url,
        title="A reasonably descriptive page title",
        ilr=75.0,
        incoming_links=20,
        outgoing_links=20,
        crawl_depth=1,
        http_status=200,
        load_time=1.0,
        in_sitemap=True,
        issues=0,
        description=LONG_DESCRIPTION,
        slug=extract_slug(url),
    )
    return replace(base, **fields)


def write_export(path, rows) -> None:
    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        writer.writerows(rows)


@pytest.fixture
def page_factory():
    return make_page


@pytest.fixture
def sample_csv(tmp_path):
    """Write the sample crawl export to a temp file and return its path."""
    path = tmp_path / "pages.csv"
    write_export(path, SAMPLE_ROWS)
    return path
