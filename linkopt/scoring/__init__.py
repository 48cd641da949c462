"""Scoring package: classifier, cluster detector, page scorer, site aggregator."""

from linkopt.scoring.aggregator import analyze_site
from linkopt.scoring.classifier import (
    KEYWORD_POLICY,
    SCORING_POLICY,
    TierPolicy,
    categorize_tier,
    classify_page,
    classify_pages,
    determine_page_type,
    partition_by_tier,
)
from linkopt.scoring.clusters import DEFAULT_CLUSTER_RULES, ClusterRule, detect_clusters
from linkopt.scoring.scorer import PageScorer

__all__ = [
    "DEFAULT_CLUSTER_RULES",
    "KEYWORD_POLICY",
    "SCORING_POLICY",
    "ClusterRule",
    "PageScorer",
    "TierPolicy",
    "analyze_site",
    "categorize_tier",
    "classify_page",
    "classify_pages",
    "detect_clusters",
    "determine_page_type",
    "partition_by_tier",
]
