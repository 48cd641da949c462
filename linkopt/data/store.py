"""In-memory store of classified pages."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Mapping, Optional

from linkopt.data.loader import load_rows, parse_rows
from linkopt.data.models import PageRecord, TierPartition
from linkopt.scoring.classifier import (
    SCORING_POLICY,
    TierPolicy,
    classify_pages,
    partition_by_tier,
    sort_by_ilr,
)


class PageStore:
    """Classified pages in input order plus their per-tier partition."""

    def __init__(self, pages: Iterable[PageRecord], policy: TierPolicy = SCORING_POLICY) -> None:
        self.policy = policy
        self._pages: List[PageRecord] = classify_pages(pages, policy)
        self.partition: TierPartition = partition_by_tier(self._pages)

    @classmethod
    def from_rows(
        cls, rows: Iterable[Mapping[str, str]], policy: TierPolicy = SCORING_POLICY
    ) -> PageStore:
        return cls(parse_rows(rows), policy)

    @classmethod
    def from_csv(cls, path: Path | str, policy: TierPolicy = SCORING_POLICY) -> PageStore:
        return cls.from_rows(load_rows(path), policy)

    @property
    def pages(self) -> List[PageRecord]:
        return list(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def pages_by_tier(self, tier: str) -> List[PageRecord]:
        return list(self.partition.get(tier))

    def get_page_by_url(self, url: str) -> Optional[PageRecord]:
        for page in self._pages:
            if page.url == url:
                return page
        return None

    def search_pages(
        self,
        query: str = "",
        tier: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[PageRecord]:
        """Case-insensitive match on title, URL or description.

        An empty query matches every page.  Pages without a title are
        skipped; results come back highest ILR first.
        """
        needle = query.strip().lower()
        matches = []
        for page in self._pages:
            if not page.title:
                continue
            if tier and page.tier != tier:
                continue
            haystacks = (page.title.lower(), page.url.lower(), page.description.lower())
            if needle and not any(needle in h for h in haystacks):
                continue
            matches.append(page)

        matches = sort_by_ilr(matches)
        return matches[:limit] if limit is not None else matches
