"""Data models for crawl pages and analysis results."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

# Tier and page-type labels
MONEY = "money"
SUPPORTING = "supporting"
TRAFFIC = "traffic"
TIERS = (MONEY, SUPPORTING, TRAFFIC)

SERVICE = "service"
BLOG = "blog"
OTHER = "other"

HIGH = "high"
MEDIUM = "medium"
LOW = "low"


@dataclass(frozen=True)
class PageRecord:
    """One crawled URL from the internal-link export.

    ``page_type`` and ``tier`` are ``None`` until the classifier returns an
    annotated copy of the record.
    """

    url: str
    title: str = ""
    ilr: float = 0.0
    raw_ilr: float = 0.0
    incoming_links: int = 0
    outgoing_links: int = 0
    crawl_depth: int = 0
    http_status: int = 0
    load_time: float = 0.0
    in_sitemap: bool = False
    issues: int = 0
    description: str = ""
    slug: str = "homepage"
    page_type: Optional[str] = None
    tier: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Recommendation:
    """A single page-level action item."""

    type: str
    priority: str
    action: str
    impact: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ScoreBreakdown:
    """The five sub-scores behind a page total, rounded for display."""

    link_score: int
    tier_score: int
    technical_score: int
    content_score: int
    cluster_score: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ScoredPage:
    """Result of scoring one :class:`PageRecord`."""

    page: PageRecord
    total: int
    breakdown: ScoreBreakdown
    grade: str
    recommendations: List[Recommendation] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "page": self.page.to_dict(),
            "total": self.total,
            "breakdown": self.breakdown.to_dict(),
            "grade": self.grade,
            "recommendations": [r.to_dict() for r in self.recommendations],
        }


@dataclass
class TopicCluster:
    """A hub page and the spoke pages grouped around it."""

    name: str
    type: str
    hub: PageRecord
    spokes: List[PageRecord] = field(default_factory=list)

    @property
    def members(self) -> List[PageRecord]:
        return [self.hub, *self.spokes]

    def contains(self, url: str) -> bool:
        return any(page.url == url for page in self.members)

    def is_hub(self, url: str) -> bool:
        return self.hub.url == url

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.type,
            "hub": self.hub.url,
            "spokes": [p.url for p in self.spokes],
        }


@dataclass
class TierPartition:
    """Classified pages split by tier, each list sorted by ILR descending."""

    money: List[PageRecord] = field(default_factory=list)
    supporting: List[PageRecord] = field(default_factory=list)
    traffic: List[PageRecord] = field(default_factory=list)

    def get(self, tier: str) -> List[PageRecord]:
        if tier not in TIERS:
            return []
        return getattr(self, tier)

    def counts(self) -> Dict[str, int]:
        return {tier: len(self.get(tier)) for tier in TIERS}

    def __len__(self) -> int:
        return len(self.money) + len(self.supporting) + len(self.traffic)


@dataclass
class Opportunity:
    """A site-level optimisation opportunity."""

    type: str
    priority: str
    issue: str
    recommendation: str
    impact: str
    page: Optional[PageRecord] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "priority": self.priority,
            "issue": self.issue,
            "recommendation": self.recommendation,
            "impact": self.impact,
            "page": self.page.url if self.page else None,
            "details": dict(self.details),
        }


@dataclass
class SiteRecommendation:
    """A strategic, site-wide recommendation."""

    priority: str
    category: str
    title: str
    action: str
    impact: str
    pages: List[PageRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "priority": self.priority,
            "category": self.category,
            "title": self.title,
            "action": self.action,
            "impact": self.impact,
            "pages": [p.url for p in self.pages],
        }


@dataclass
class TierDistribution:
    count: int
    percentage: int
    ideal: str
    status: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class LinkEquityFlow:
    score: int
    high_authority_pages: int
    low_authority_pages: int
    status: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Analytics:
    """Descriptive statistics over the whole page set."""

    total_pages: int
    orphaned_pages: int
    high_performing_pages: int
    low_performing_pages: int
    averages: Dict[str, float]
    distribution: Dict[str, int]
    orphaned_pages_list: List[PageRecord] = field(default_factory=list)
    top_performers: List[PageRecord] = field(default_factory=list)
    under_performers: List[PageRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total_pages": self.total_pages,
            "orphaned_pages": self.orphaned_pages,
            "high_performing_pages": self.high_performing_pages,
            "low_performing_pages": self.low_performing_pages,
            "averages": dict(self.averages),
            "distribution": dict(self.distribution),
            "orphaned_pages_list": [p.url for p in self.orphaned_pages_list],
            "top_performers": [p.url for p in self.top_performers],
            "under_performers": [p.url for p in self.under_performers],
        }


@dataclass
class OverallScore:
    score: int
    grade: str
    total_pages: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class SiteAnalysis:
    """Everything the report renderers need from one analysis run."""

    overall: OverallScore
    distribution: Dict[str, TierDistribution]
    tier_scores: Dict[str, int]
    analytics: Analytics
    opportunities: List[Opportunity]
    link_equity_flow: LinkEquityFlow
    recommendations: List[SiteRecommendation]
    page_scores: List[ScoredPage]
    clusters: List[TopicCluster] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "overall": self.overall.to_dict(),
            "tiers": {
                "distribution": {k: v.to_dict() for k, v in self.distribution.items()},
                "scores": dict(self.tier_scores),
            },
            "analytics": self.analytics.to_dict(),
            "opportunities": [o.to_dict() for o in self.opportunities],
            "link_equity_flow": self.link_equity_flow.to_dict(),
            "recommendations": [r.to_dict() for r in self.recommendations],
            "page_scores": [s.to_dict() for s in self.page_scores],
            "clusters": [c.to_dict() for c in self.clusters],
        }
