"""Read the internal-link crawl export into :class:`PageRecord` objects.

The export is a CSV with one row per URL.  Rows are trusted only loosely:
any numeric column that is missing or unparseable becomes ``0`` and the row
is kept, so a single bad cell never drops a page from the analysis.
"""

from __future__ import annotations

import csv
import logging
import math
from pathlib import Path
from typing import Dict, Iterable, List, Mapping
from urllib.parse import urlparse

from linkopt.data.models import PageRecord
from linkopt.errors import DatasetNotFoundError

logger = logging.getLogger(__name__)

HOMEPAGE_SLUG = "homepage"

# Column headers used by the crawl export
COL_URL = "Page URL"
COL_TITLE = "Page Title"
COL_ILR = "ILR"
COL_RAW_ILR = "Raw ILR"
COL_INCOMING = "Incoming Internal Links"
COL_OUTGOING = "Outgoing Internal Links"
COL_DEPTH = "Crawl Depth"
COL_STATUS = "HTTP Status Code"
COL_LOAD_TIME = "Page (HTML) Load Time, sec"
COL_SITEMAP = "In sitemap"
COL_ISSUES = "Issues"
COL_DESCRIPTION = "Description"


def load_rows(path: Path | str) -> List[Dict[str, str]]:
    """Return the raw string-keyed rows of the CSV at *path*."""
    path = Path(path)
    if not path.is_file():
        raise DatasetNotFoundError(path)

    # utf-8-sig strips the BOM some crawlers prepend to the header row;
    # undecodable bytes become U+FFFD instead of aborting the load
    with path.open(newline="", encoding="utf-8-sig", errors="replace") as fh:
        rows = list(csv.DictReader(fh))

    logger.info("Loaded %d rows from %s", len(rows), path)
    return rows


def extract_slug(url: str | None) -> str:
    """Last non-empty path segment of *url*, or ``"homepage"``."""
    if not url:
        return HOMEPAGE_SLUG
    path = urlparse(url).path.strip("/")
    slug = path.split("/")[-1] if path else ""
    return slug or HOMEPAGE_SLUG


def _to_float(value) -> float:
    if value is None:
        return 0.0
    try:
        number = float(str(value).strip())
    except ValueError:
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return max(0.0, number)


def _to_int(value) -> int:
    return int(_to_float(value))


def _to_str(value) -> str:
    return str(value).strip() if value is not None else ""


def parse_row(row: Mapping[str, str]) -> PageRecord:
    """Coerce one raw CSV row into an unclassified :class:`PageRecord`."""
    url = _to_str(row.get(COL_URL))
    return PageRecord(
        url=url,
        title=_to_str(row.get(COL_TITLE)),
        ilr=_to_float(row.get(COL_ILR)),
        raw_ilr=_to_float(row.get(COL_RAW_ILR)),
        incoming_links=_to_int(row.get(COL_INCOMING)),
        outgoing_links=_to_int(row.get(COL_OUTGOING)),
        crawl_depth=_to_int(row.get(COL_DEPTH)),
        http_status=_to_int(row.get(COL_STATUS)),
        load_time=_to_float(row.get(COL_LOAD_TIME)),
        in_sitemap=_to_str(row.get(COL_SITEMAP)) == "1",
        issues=_to_int(row.get(COL_ISSUES)),
        description=_to_str(row.get(COL_DESCRIPTION)),
        slug=extract_slug(url),
    )


def parse_rows(rows: Iterable[Mapping[str, str]]) -> List[PageRecord]:
    pages = [parse_row(row) for row in rows]
    missing_url = sum(1 for p in pages if not p.url)
    if missing_url:
        logger.debug("%d rows have no %r value", missing_url, COL_URL)
    return pages
