"""Per-page optimisation scoring.

A page's total is a weighted blend of five sub-scores, each on a 0-100
scale:

    link       30%  incoming links, ILR and outgoing-link balance
    tier       20%  how well the page meets its tier's expectations
    technical  20%  status code, load time, issues, sitemap inclusion
    content    15%  title, description, slug and crawl depth
    cluster    15%  membership of a topic cluster

The total is rounded half-up and capped at 100.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from linkopt.data.models import (
    HIGH,
    LOW,
    MEDIUM,
    PageRecord,
    Recommendation,
    ScoreBreakdown,
    ScoredPage,
    TopicCluster,
)
from linkopt.errors import UnclassifiedPageError
from linkopt.scoring.constants import (
    DEFAULT_IDEAL_OUTGOING,
    IDEAL_OUTGOING,
    RECOMMENDATION_THRESHOLDS,
    SLOW_LOAD_SECONDS,
    TIER_EXPECTATIONS,
    UNKNOWN_TIER_SCORE,
    WEIGHTS,
)
from linkopt.scoring.utils import get_grade, round_half_up, sort_by_priority

_TIER_ADVICE = {
    "money": "This money page needs more internal links to reach its potential",
    "supporting": "This supporting page should link to more relevant content",
    "traffic": "This content page needs better integration with your site structure",
}
_DEFAULT_TIER_ADVICE = "Improve page positioning in site hierarchy"


# ---------------------------------------------------------------------------
# Sub-scores
# ---------------------------------------------------------------------------

def outgoing_balance(page: PageRecord, ideal_outgoing: Mapping[str, int] = IDEAL_OUTGOING) -> float:
    """0-20 points, full marks at the tier's ideal outgoing link count."""
    ideal = ideal_outgoing.get(page.tier, DEFAULT_IDEAL_OUTGOING)
    difference = abs(page.outgoing_links - ideal)
    return max(0.0, 20 - difference * 0.5)


def link_score(page: PageRecord) -> float:
    incoming = min(page.incoming_links / 2, 40)
    ilr = page.ilr * 0.4
    return min(100.0, incoming + ilr + outgoing_balance(page))


def tier_score(page: PageRecord, expectations: Mapping[str, Mapping[str, float]] = TIER_EXPECTATIONS) -> float:
    expected = expectations.get(page.tier)
    if not expected:
        return float(UNKNOWN_TIER_SCORE)

    min_ilr = expected["min_ilr"]
    min_links = expected["min_links"]
    max_links = expected["max_links"]
    links = page.incoming_links

    score = 50.0 if page.ilr >= min_ilr else page.ilr / min_ilr * 50

    if min_links <= links <= max_links:
        score += 50
    elif links < min_links:
        score += links / min_links * 50
    else:
        # Over-linked pages keep at least half the link points
        score += max(25.0, 50 - (links - max_links) * 0.5)

    return min(100.0, score)


def technical_score(page: PageRecord) -> float:
    score = 100.0
    if page.http_status != 200:
        score -= 25
    if page.load_time > SLOW_LOAD_SECONDS:
        score -= min(25.0, (page.load_time - SLOW_LOAD_SECONDS) * 5)
    if page.issues > 0:
        score -= min(25, page.issues * 2)
    if not page.in_sitemap:
        score -= 25
    return max(0.0, score)


def content_score(page: PageRecord) -> float:
    score = 0.0

    title_len = len(page.title or "")
    if title_len > 10:
        score += 30
        if 30 < title_len < 60:
            score += 10

    desc_len = len(page.description or "")
    if desc_len > 50:
        score += 30
        if desc_len > 100:
            score += 10

    if page.slug and "-" in page.slug:
        score += 20

    score += max(0, 20 - page.crawl_depth * 5)
    return min(100.0, score)


def cluster_score(page: PageRecord, member_urls: Iterable[str], hub_urls: Iterable[str]) -> float:
    score = 50.0
    if page.url in member_urls:
        score += 30
        if page.url in hub_urls:
            score += 20
    return min(100.0, score)


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------

def page_recommendations(page: PageRecord, scores: Mapping[str, float]) -> List[Recommendation]:
    """Fixed-template action items for every sub-score below its threshold."""
    thresholds = RECOMMENDATION_THRESHOLDS
    recs: List[Recommendation] = []

    if scores["link_score"] < thresholds["link_score"]:
        if page.incoming_links < 10:
            recs.append(Recommendation(
                type="links",
                priority=HIGH,
                action=f"Add {10 - page.incoming_links} more internal links to this page",
                impact="Will significantly improve page authority and rankings",
            ))
        if page.ilr < 70:
            recs.append(Recommendation(
                type="links",
                priority=HIGH,
                action="Focus on getting high-quality internal links from authoritative pages",
                impact="Will improve Internal Link Ratio and overall page strength",
            ))

    if scores["tier_score"] < thresholds["tier_score"]:
        recs.append(Recommendation(
            type="tier",
            priority=MEDIUM,
            action=_TIER_ADVICE.get(page.tier, _DEFAULT_TIER_ADVICE),
            impact="Will better align page with its intended role in site architecture",
        ))

    if scores["technical_score"] < thresholds["technical_score"]:
        if page.load_time > SLOW_LOAD_SECONDS:
            recs.append(Recommendation(
                type="technical",
                priority=HIGH,
                action=f"Optimize page load time (currently {page.load_time:.2f}s)",
                impact="Will improve user experience and search rankings",
            ))
        if page.issues > 0:
            recs.append(Recommendation(
                type="technical",
                priority=HIGH,
                action=f"Fix {page.issues} technical issues on this page",
                impact="Will resolve SEO and user experience problems",
            ))
        if page.http_status != 200:
            recs.append(Recommendation(
                type="technical",
                priority=HIGH,
                action=f"Fix the HTTP status of this page (currently {page.http_status})",
                impact="Will make sure search engines can crawl and index this page",
            ))
        if not page.in_sitemap:
            recs.append(Recommendation(
                type="technical",
                priority=HIGH,
                action="Add this page to your XML sitemap",
                impact="Will help search engines discover and index this page",
            ))

    if scores["content_score"] < thresholds["content_score"]:
        if len(page.title or "") < 30:
            recs.append(Recommendation(
                type="content",
                priority=MEDIUM,
                action="Improve page title - make it more descriptive and keyword-rich",
                impact="Will improve click-through rates and search rankings",
            ))
        if len(page.description or "") < 100:
            recs.append(Recommendation(
                type="content",
                priority=MEDIUM,
                action="Add or improve meta description to better describe page content",
                impact="Will improve search result appearance and click-through rates",
            ))

    if scores["cluster_score"] < thresholds["cluster_score"]:
        recs.append(Recommendation(
            type="cluster",
            priority=LOW,
            action="Consider creating topic clusters around this page's main theme",
            impact="Will improve topical authority and internal link structure",
        ))

    return sort_by_priority(recs)


# ---------------------------------------------------------------------------
# Scorer
# ---------------------------------------------------------------------------

class PageScorer:
    """Score classified pages against a fixed set of topic clusters."""

    def __init__(
        self,
        clusters: Sequence[TopicCluster] = (),
        weights: Optional[Mapping[str, float]] = None,
    ) -> None:
        self._weights: Dict[str, float] = dict(weights or WEIGHTS)
        self._member_urls = {p.url for c in clusters for p in c.members}
        self._hub_urls = {c.hub.url for c in clusters}

    def sub_scores(self, page: PageRecord) -> Dict[str, float]:
        return {
            "link_score": link_score(page),
            "tier_score": tier_score(page),
            "technical_score": technical_score(page),
            "content_score": content_score(page),
            "cluster_score": cluster_score(page, self._member_urls, self._hub_urls),
        }

    def score(self, page: PageRecord) -> ScoredPage:
        if page.tier is None:
            raise UnclassifiedPageError(page.url)

        scores = self.sub_scores(page)
        weighted = sum(scores[name] * weight for name, weight in self._weights.items())
        total = max(0, min(100, round_half_up(weighted)))

        return ScoredPage(
            page=page,
            total=total,
            breakdown=ScoreBreakdown(**{k: round_half_up(v) for k, v in scores.items()}),
            grade=get_grade(total),
            recommendations=page_recommendations(page, scores),
        )

    def score_all(self, pages: Iterable[PageRecord]) -> List[ScoredPage]:
        return [self.score(page) for page in pages]
