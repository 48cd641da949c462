"""Lightweight report-preview scoring.

A quick estimate used for page listings, deliberately independent of the
weighted :class:`~linkopt.scoring.scorer.PageScorer`: link points plus fixed
technical/content/cluster allowances plus a flat bonus for how well the
page's tier matches the operator's primary goal.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from linkopt.data.models import PageRecord

_PREVIEW_TECHNICAL = 20
_PREVIEW_CONTENT = 15
_PREVIEW_CLUSTER = 15

# primary goal -> (tier receiving 20, tier receiving 10); everything else 5
_GOAL_TIER_BONUS = {
    "conversions": ("money", "supporting"),
    "traffic": ("traffic", "supporting"),
    "authority": ("supporting", "money"),
}
_BALANCED_BONUS = 10


def get_tier_score(tier: str | None, primary_goal: str = "balanced") -> int:
    """Flat 20/10/5 bonus for goal alignment; 10 for a balanced goal."""
    ranking = _GOAL_TIER_BONUS.get(primary_goal)
    if ranking is None:
        return _BALANCED_BONUS
    best, second = ranking
    if tier == best:
        return 20
    if tier == second:
        return 10
    return 5


def preview_link_score(page: PageRecord) -> float:
    return min(page.incoming_links / 2, 40) + page.ilr * 0.4


def calculate_preview_score(page: PageRecord, primary_goal: str = "balanced") -> float:
    return min(
        100.0,
        preview_link_score(page)
        + _PREVIEW_TECHNICAL
        + _PREVIEW_CONTENT
        + _PREVIEW_CLUSTER
        + get_tier_score(page.tier, primary_goal),
    )


def preview_recommendations(page: PageRecord) -> List[str]:
    recs = []
    if page.incoming_links <= 2:
        recs.append("Add more internal links to improve authority")
    if page.ilr < 50:
        recs.append("Improve internal link ratio")
    return recs or ["Page is well optimized"]


def rank_by_preview_score(
    pages: Sequence[PageRecord],
    primary_goal: str = "balanced",
    limit: Optional[int] = None,
) -> List[Tuple[PageRecord, float]]:
    """Pair each page with its preview score, best first.

    The sort is stable, so equal scores keep the order of *pages*.
    """
    ranked = sorted(
        ((page, calculate_preview_score(page, primary_goal)) for page in pages),
        key=lambda item: item[1],
        reverse=True,
    )
    return ranked[:limit] if limit is not None else ranked
