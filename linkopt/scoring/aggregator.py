"""Site-level aggregation: distribution, averages, opportunities, advice.

:func:`analyze_site` is the single entry point.  It takes classified pages
and returns a fresh :class:`SiteAnalysis`; nothing in the result points
back into the caller's list.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from linkopt.data.models import (
    HIGH,
    LOW,
    MEDIUM,
    SERVICE,
    TIERS,
    TRAFFIC,
    Analytics,
    LinkEquityFlow,
    Opportunity,
    OverallScore,
    PageRecord,
    ScoredPage,
    SiteAnalysis,
    SiteRecommendation,
    TierDistribution,
    TierPartition,
    TopicCluster,
)
from linkopt.data.preferences import BusinessPreferences
from linkopt.scoring.classifier import partition_by_tier
from linkopt.scoring.clusters import detect_clusters
from linkopt.scoring.constants import (
    EQUITY_GOOD_RATIO,
    EQUITY_LINKS_PER_PAGE,
    HIGH_AUTHORITY_MIN_ILR,
    HIGH_PERFORMER_MIN_ILR,
    LOW_AUTHORITY_MAX_ILR,
    LOW_PERFORMER_MAX_ILR,
    LOW_SCORE_THRESHOLD,
    ORPHAN_MAX_INCOMING,
    OVER_LINKED_MIN_INCOMING,
    SUPPORTING_MIN_ILR,
    TIER_IDEAL_BANDS,
    UNDER_LINKED_MAX_INCOMING,
)
from linkopt.scoring.scorer import PageScorer
from linkopt.scoring.utils import get_grade, mean, round_half_up, sort_by_priority

logger = logging.getLogger(__name__)


def is_orphaned(page: PageRecord) -> bool:
    return page.incoming_links <= ORPHAN_MAX_INCOMING


# ---------------------------------------------------------------------------
# Distribution
# ---------------------------------------------------------------------------

def distribution_status(actual: float, min_ideal: float, max_ideal: float) -> str:
    if min_ideal <= actual <= max_ideal:
        return "good"
    if actual < min_ideal:
        return "too-few"
    return "too-many"


def _band_label(band) -> str:
    low, high = band
    return f"{round_half_up(low * 100)}-{round_half_up(high * 100)}%"


def analyze_tier_distribution(partition: TierPartition) -> Dict[str, TierDistribution]:
    total = len(partition)
    result = {}
    for tier in TIERS:
        count = len(partition.get(tier))
        share = count / total if total else 0.0
        band = TIER_IDEAL_BANDS[tier]
        result[tier] = TierDistribution(
            count=count,
            percentage=round_half_up(share * 100),
            ideal=_band_label(band),
            status=distribution_status(share, *band),
        )
    return result


def tier_average_scores(scored: Sequence[ScoredPage]) -> Dict[str, int]:
    """Mean page total per tier, 0 for a tier with no pages."""
    return {
        tier: round_half_up(mean(s.total for s in scored if s.page.tier == tier))
        for tier in TIERS
    }


# ---------------------------------------------------------------------------
# Analytics / link equity
# ---------------------------------------------------------------------------

def get_analytics(pages: Sequence[PageRecord], partition: TierPartition) -> Analytics:
    orphaned = [p for p in pages if is_orphaned(p)]
    high = [p for p in pages if p.ilr >= HIGH_PERFORMER_MIN_ILR]
    low = [p for p in pages if p.ilr < LOW_PERFORMER_MAX_ILR]

    return Analytics(
        total_pages=len(pages),
        orphaned_pages=len(orphaned),
        high_performing_pages=len(high),
        low_performing_pages=len(low),
        averages={
            "ilr": round_half_up(mean(p.ilr for p in pages), 2),
            "incoming_links": round_half_up(mean(p.incoming_links for p in pages), 2),
            "load_time": round_half_up(mean(p.load_time for p in pages), 2),
        },
        distribution=partition.counts(),
        orphaned_pages_list=orphaned,
        top_performers=high[:10],
        under_performers=low[:10],
    )


def analyze_link_equity_flow(pages: Sequence[PageRecord]) -> LinkEquityFlow:
    """Estimate how much equity high-authority pages pass on.

    Each page with ILR above 80 can pass at most ten links' worth; the
    score is the share of that maximum its outgoing links cover.
    """
    high_authority = [p for p in pages if p.ilr > HIGH_AUTHORITY_MIN_ILR]
    low_authority = [p for p in pages if p.ilr < LOW_AUTHORITY_MAX_ILR]

    flow = sum(min(p.outgoing_links, EQUITY_LINKS_PER_PAGE) for p in high_authority)
    capacity = EQUITY_LINKS_PER_PAGE * len(high_authority)
    ratio = flow / capacity if capacity else 0.0

    return LinkEquityFlow(
        score=round_half_up(ratio * 100),
        high_authority_pages=len(high_authority),
        low_authority_pages=len(low_authority),
        status="good" if ratio > EQUITY_GOOD_RATIO else "needs-improvement",
    )


# ---------------------------------------------------------------------------
# Opportunities
# ---------------------------------------------------------------------------

def find_opportunities(pages: Sequence[PageRecord]) -> List[Opportunity]:
    opportunities: List[Opportunity] = []

    for page in pages:
        if is_orphaned(page):
            opportunities.append(Opportunity(
                type="orphaned",
                priority=HIGH,
                page=page,
                issue="Page has very few internal links",
                recommendation=f"Add 5-10 internal links from related pages to {page.title or page.url}",
                impact="High - Will significantly improve page authority",
            ))

    for page in pages:
        if page.ilr < SUPPORTING_MIN_ILR and page.page_type == SERVICE:
            opportunities.append(Opportunity(
                type="low-ilr",
                priority=MEDIUM,
                page=page,
                issue="Service page with low internal link ratio",
                recommendation=(
                    f"Increase internal links to {page.title or page.url} "
                    "from blog posts and supporting pages"
                ),
                impact="Medium - Will improve service page authority",
            ))

    over_linked = [p for p in pages if p.incoming_links > OVER_LINKED_MIN_INCOMING]
    under_linked = [
        p for p in pages
        if p.incoming_links < UNDER_LINKED_MAX_INCOMING and p.tier != TRAFFIC
    ]
    if over_linked and under_linked:
        opportunities.append(Opportunity(
            type="distribution",
            priority=MEDIUM,
            issue="Uneven link distribution across tiers",
            recommendation="Redistribute some links from over-linked pages to under-linked pages",
            impact="Medium - Will improve overall site architecture",
            details={"over_linked": len(over_linked), "under_linked": len(under_linked)},
        ))

    return sort_by_priority(opportunities)


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------

def generate_site_recommendations(
    scored: Sequence[ScoredPage],
    opportunities: Sequence[Opportunity],
    partition: TierPartition,
    preferences: BusinessPreferences,
    clusters: Sequence[TopicCluster] = (),
    distribution: Optional[Dict[str, TierDistribution]] = None,
) -> List[SiteRecommendation]:
    recs: List[SiteRecommendation] = []
    goal = preferences.primary_goal
    areas = preferences.optimization_areas

    if goal == "conversions":
        recs.append(SiteRecommendation(
            priority=HIGH,
            category="conversions",
            title="Optimize Money Pages for Conversions",
            action="Focus internal linking on your highest-converting service pages",
            pages=partition.money[:5],
            impact="Direct impact on business revenue",
        ))
    elif goal == "traffic":
        recs.append(SiteRecommendation(
            priority=HIGH,
            category="traffic",
            title="Boost Content Page Authority",
            action="Add more internal links to your blog posts and informational content",
            pages=[p for p in partition.traffic if p.ilr < LOW_PERFORMER_MAX_ILR][:10],
            impact="Will improve organic search rankings and traffic",
        ))

    orphaned = [opp.page for opp in opportunities if opp.type == "orphaned"]
    if orphaned:
        recs.append(SiteRecommendation(
            priority=HIGH,
            category="technical",
            title="Fix Orphaned Pages",
            action=f"Add internal links to {len(orphaned)} orphaned pages",
            pages=orphaned[:5],
            impact="Will improve overall site structure and SEO",
        ))

    low_scores = [s for s in scored if s.total < LOW_SCORE_THRESHOLD]
    if low_scores:
        recs.append(SiteRecommendation(
            priority=MEDIUM,
            category="optimization",
            title="Improve Low-Scoring Pages",
            action=f"Optimize {len(low_scores)} pages with scores below {LOW_SCORE_THRESHOLD}",
            pages=[s.page for s in low_scores][:5],
            impact="Will raise overall site quality and search performance",
        ))

    if "technical" in areas:
        broken = [s.page for s in scored if s.page.http_status != 200 or s.page.issues > 0]
        if broken:
            recs.append(SiteRecommendation(
                priority=HIGH,
                category="technical",
                title="Resolve Technical Issues",
                action=f"Fix status codes and reported issues on {len(broken)} pages",
                pages=broken[:5],
                impact="Will keep link equity from leaking into broken pages",
            ))

    if "clusters" in areas and clusters:
        recs.append(SiteRecommendation(
            priority=MEDIUM,
            category="clusters",
            title="Strengthen Topic Clusters",
            action=(
                f"Link every spoke to its hub and back across {len(clusters)} clusters"
            ),
            pages=[c.hub for c in clusters],
            impact="Will improve topical authority around your core services",
        ))

    if "distribution" in areas and distribution:
        off_band = [tier for tier, d in distribution.items() if d.status != "good"]
        if off_band:
            recs.append(SiteRecommendation(
                priority=LOW,
                category="architecture",
                title="Rebalance Page Tiers",
                action=f"Adjust the share of {', '.join(off_band)} pages toward the ideal ranges",
                impact="Will keep link equity flowing toward money pages",
            ))

    return sort_by_priority(recs)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def analyze_site(
    pages: Iterable[PageRecord],
    preferences: Optional[BusinessPreferences] = None,
    clusters: Optional[Sequence[TopicCluster]] = None,
) -> SiteAnalysis:
    """Score every classified page and aggregate the results.

    An empty page list produces a zero analysis (score 0, grade F, empty
    lists) rather than an error.  The site grade is taken from the rounded
    mean, so it always agrees with the displayed score.
    """
    pages = list(pages)
    preferences = preferences or BusinessPreferences()
    partition = partition_by_tier(pages)
    if clusters is None:
        clusters = detect_clusters(pages)

    scorer = PageScorer(clusters)
    scored = scorer.score_all(pages)

    overall_score = round_half_up(mean(s.total for s in scored))
    distribution = analyze_tier_distribution(partition)
    opportunities = find_opportunities(pages)

    analysis = SiteAnalysis(
        overall=OverallScore(
            score=overall_score,
            grade=get_grade(overall_score),
            total_pages=len(pages),
        ),
        distribution=distribution,
        tier_scores=tier_average_scores(scored),
        analytics=get_analytics(pages, partition),
        opportunities=opportunities,
        link_equity_flow=analyze_link_equity_flow(pages),
        recommendations=generate_site_recommendations(
            scored, opportunities, partition, preferences, clusters, distribution
        ),
        page_scores=sorted(scored, key=lambda s: -s.total),
        clusters=list(clusters),
    )
    logger.info(
        "Analysed %d pages: score %d (%s), %d opportunities",
        len(pages), overall_score, analysis.overall.grade, len(opportunities),
    )
    return analysis
