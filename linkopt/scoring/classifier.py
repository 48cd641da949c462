"""Assign a page type and a business tier to every crawled page.

Both steps are pure functions of a record's fields.  Classification returns
annotated copies and never mutates the records it is given.

Two tier policies exist.  ``SCORING_POLICY`` derives the tier from the page
type plus ILR and feeds the scorer and cluster detector.
``KEYWORD_POLICY`` lets URL keywords decide first and falls back to ILR
alone; the page search and the report-preview scorer use it.  Both run
through the same :func:`categorize_tier`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import FrozenSet, Iterable, List, Optional, Tuple

from linkopt.data.models import (
    BLOG,
    MONEY,
    OTHER,
    SERVICE,
    SUPPORTING,
    TRAFFIC,
    PageRecord,
    TierPartition,
)
from linkopt.scoring.constants import (
    BLOG_TITLE_MARKERS,
    BLOG_URL_MARKERS,
    MONEY_MIN_ILR,
    SERVICE_KEYWORDS,
    SUPPORTING_KEYWORDS,
    SUPPORTING_MIN_ILR,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TierPolicy:
    """Rules mapping a typed page to a tier.

    Evaluation order:

    1. ``keyword_tiers``: the first keyword found in the lower-cased URL
       decides the tier.
    2. Money, when ``ilr >= money_min_ilr`` and the page type is in
       ``money_page_types`` (``None`` means any type).
    3. Supporting, when the page type is in ``supporting_page_types`` or
       ``supporting_min_ilr <= ilr < money_min_ilr``.
    4. Traffic otherwise.
    """

    name: str
    keyword_tiers: Tuple[Tuple[str, str], ...] = ()
    money_page_types: Optional[FrozenSet[str]] = None
    supporting_page_types: FrozenSet[str] = frozenset()
    money_min_ilr: float = MONEY_MIN_ILR
    supporting_min_ilr: float = SUPPORTING_MIN_ILR


SCORING_POLICY = TierPolicy(
    name="scoring",
    money_page_types=frozenset({SERVICE}),
    supporting_page_types=frozenset({SUPPORTING}),
)

KEYWORD_POLICY = TierPolicy(
    name="keyword",
    keyword_tiers=tuple((kw, MONEY) for kw in SERVICE_KEYWORDS)
    + tuple((kw, SUPPORTING) for kw in SUPPORTING_KEYWORDS),
)


def determine_page_type(url: Optional[str], title: Optional[str]) -> str:
    if not url or not title:
        return OTHER

    url_lower = url.lower()
    title_lower = title.lower()

    if any(keyword in url_lower for keyword in SERVICE_KEYWORDS):
        return SERVICE
    if any(keyword in url_lower for keyword in SUPPORTING_KEYWORDS):
        return SUPPORTING
    if any(marker in url_lower for marker in BLOG_URL_MARKERS) or any(
        marker in title_lower for marker in BLOG_TITLE_MARKERS
    ):
        return BLOG
    return OTHER


def categorize_tier(page: PageRecord, policy: TierPolicy = SCORING_POLICY) -> str:
    """Return the tier *page* belongs to under *policy*.

    Uses ``page.page_type`` when set, otherwise derives it from URL and
    title, so the result never depends on what ran before.
    """
    url_lower = (page.url or "").lower()
    for keyword, tier in policy.keyword_tiers:
        if keyword in url_lower:
            return tier

    page_type = page.page_type or determine_page_type(page.url, page.title)
    ilr = page.ilr

    money_type_ok = policy.money_page_types is None or page_type in policy.money_page_types
    if money_type_ok and ilr >= policy.money_min_ilr:
        return MONEY
    if page_type in policy.supporting_page_types or (
        policy.supporting_min_ilr <= ilr < policy.money_min_ilr
    ):
        return SUPPORTING
    return TRAFFIC


def classify_page(page: PageRecord, policy: TierPolicy = SCORING_POLICY) -> PageRecord:
    """Return a copy of *page* with ``page_type`` and ``tier`` filled in."""
    page_type = determine_page_type(page.url, page.title)
    typed = replace(page, page_type=page_type, tier=None)
    return replace(typed, tier=categorize_tier(typed, policy))


def classify_pages(
    pages: Iterable[PageRecord], policy: TierPolicy = SCORING_POLICY
) -> List[PageRecord]:
    classified = [classify_page(page, policy) for page in pages]
    logger.debug("Classified %d pages with the %s policy", len(classified), policy.name)
    return classified


def sort_by_ilr(pages: Iterable[PageRecord]) -> List[PageRecord]:
    """Stable sort, highest ILR first."""
    return sorted(pages, key=lambda p: -p.ilr)


def partition_by_tier(pages: Iterable[PageRecord]) -> TierPartition:
    """Split classified pages into per-tier lists, each sorted by ILR.

    Every page lands in exactly one list.
    """
    partition = TierPartition()
    for page in pages:
        if page.tier == MONEY:
            partition.money.append(page)
        elif page.tier == SUPPORTING:
            partition.supporting.append(page)
        else:
            partition.traffic.append(page)

    partition.money = sort_by_ilr(partition.money)
    partition.supporting = sort_by_ilr(partition.supporting)
    partition.traffic = sort_by_ilr(partition.traffic)
    return partition
