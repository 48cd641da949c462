"""Topic cluster detection.

A cluster is a hub page plus the spoke pages that share its theme.  Themes
are fixed keyword sets matched against URL slugs; each :class:`ClusterRule`
is evaluated on its own, so a page may belong to several clusters if the
rule set is reconfigured with overlapping keywords.

Hub selection precondition: candidates are ordered by ILR descending (ties
keep input order) before a rule picks its hub, so "first match" always
means "highest-ILR match", whatever order the caller passed pages in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from linkopt.data.models import BLOG, SERVICE, SUPPORTING, TRAFFIC, PageRecord, TopicCluster
from linkopt.scoring.classifier import sort_by_ilr


@dataclass(frozen=True)
class ClusterRule:
    name: str
    type: str
    keywords: Tuple[str, ...] = ()
    page_type: Optional[str] = None
    tier: Optional[str] = None
    preferred_hub: Optional[str] = None
    min_ilr: Optional[float] = None
    max_spokes: Optional[int] = None

    def matches(self, page: PageRecord) -> bool:
        if self.page_type is not None and page.page_type != self.page_type:
            return False
        if self.tier is not None and page.tier != self.tier:
            return False
        if self.min_ilr is not None and not page.ilr > self.min_ilr:
            return False
        if self.keywords and not any(kw in page.slug for kw in self.keywords):
            return False
        return True


DEFAULT_CLUSTER_RULES: Tuple[ClusterRule, ...] = (
    ClusterRule(
        name="Commercial Cleaning Services",
        type="service-cluster",
        page_type=SERVICE,
        keywords=("office-building", "bank-cleaning", "medical-facility", "school-cleaning"),
        preferred_hub="office-building",
    ),
    ClusterRule(
        name="Specialized Cleaning Solutions",
        type="service-cluster",
        page_type=SERVICE,
        keywords=("auto-dealership", "warehouse", "church"),
    ),
    ClusterRule(
        name="Supporting Services & Solutions",
        type="supporting-cluster",
        tier=SUPPORTING,
        keywords=("day-porter", "carpet-cleaning", "floor-cleaning"),
    ),
    ClusterRule(
        name="Cleaning Tips & Education",
        type="content-cluster",
        page_type=BLOG,
        tier=TRAFFIC,
        min_ilr=30,
        max_spokes=5,
    ),
)


def _pick_hub(rule: ClusterRule, candidates: Sequence[PageRecord]) -> PageRecord:
    if rule.preferred_hub:
        for page in candidates:
            if rule.preferred_hub in page.slug:
                return page
    return candidates[0]


def build_cluster(rule: ClusterRule, pages: Iterable[PageRecord]) -> Optional[TopicCluster]:
    """Apply one rule; ``None`` when no page matches."""
    candidates = sort_by_ilr(p for p in pages if rule.matches(p))
    if not candidates:
        return None

    hub = _pick_hub(rule, candidates)
    spokes = [p for p in candidates if p.url != hub.url]
    if rule.max_spokes is not None:
        spokes = spokes[: rule.max_spokes]
    return TopicCluster(name=rule.name, type=rule.type, hub=hub, spokes=spokes)


def detect_clusters(
    pages: Iterable[PageRecord],
    rules: Sequence[ClusterRule] = DEFAULT_CLUSTER_RULES,
) -> List[TopicCluster]:
    """Group classified pages into topic clusters.

    Never raises on empty or unmatched input; returns ``[]`` instead.
    """
    pages = list(pages)
    clusters = []
    for rule in rules:
        cluster = build_cluster(rule, pages)
        if cluster is not None:
            clusters.append(cluster)
    return clusters
