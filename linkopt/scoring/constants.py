"""
Fixed tables for classification, scoring and aggregation.
Keyword lists, weights, per-tier expectations and grade thresholds.
"""

# =============================================================================
# PAGE TYPE CLASSIFICATION
# =============================================================================

SERVICE_KEYWORDS = (
    "cleaning-services", "bank-cleaning", "medical-facility", "office-building",
    "school-cleaning", "church-cleaning", "auto-dealership", "warehouse-cleaning",
)

SUPPORTING_KEYWORDS = ("about", "contact", "day-porter", "carpet-cleaning", "floor-cleaning")

BLOG_URL_MARKERS = ("/blog/", "/recent-blog/")
BLOG_TITLE_MARKERS = ("tips", "guide")

# =============================================================================
# TIER THRESHOLDS
# =============================================================================

MONEY_MIN_ILR = 95
SUPPORTING_MIN_ILR = 70

# =============================================================================
# PAGE SCORING
# =============================================================================

WEIGHTS = {
    "link_score": 0.30,
    "tier_score": 0.20,
    "technical_score": 0.20,
    "content_score": 0.15,
    "cluster_score": 0.15,
}

# Ideal number of outgoing internal links per tier
IDEAL_OUTGOING = {"money": 15, "supporting": 25, "traffic": 35}
DEFAULT_IDEAL_OUTGOING = 25

TIER_EXPECTATIONS = {
    "money": {"min_ilr": 95, "min_links": 50, "max_links": 100},
    "supporting": {"min_ilr": 70, "min_links": 30, "max_links": 80},
    "traffic": {"min_ilr": 30, "min_links": 5, "max_links": 50},
}
UNKNOWN_TIER_SCORE = 50

SLOW_LOAD_SECONDS = 3

# Sub-score below which recommendations are generated
RECOMMENDATION_THRESHOLDS = {
    "link_score": 60,
    "tier_score": 70,
    "technical_score": 80,
    "content_score": 70,
    "cluster_score": 70,
}

GRADE_THRESHOLDS = (
    (90, "A+"),
    (80, "A"),
    (70, "B"),
    (60, "C"),
    (50, "D"),
)
FAILING_GRADE = "F"

PRIORITY_ORDER = {"high": 3, "medium": 2, "low": 1}

# =============================================================================
# SITE AGGREGATION
# =============================================================================

# Ideal share of pages per tier, as (min, max) fractions
TIER_IDEAL_BANDS = {
    "money": (0.05, 0.15),
    "supporting": (0.25, 0.35),
    "traffic": (0.50, 0.70),
}

ORPHAN_MAX_INCOMING = 2
HIGH_PERFORMER_MIN_ILR = 90
LOW_PERFORMER_MAX_ILR = 50
HIGH_AUTHORITY_MIN_ILR = 80
LOW_AUTHORITY_MAX_ILR = 50
EQUITY_LINKS_PER_PAGE = 10
EQUITY_GOOD_RATIO = 0.6
OVER_LINKED_MIN_INCOMING = 50
UNDER_LINKED_MAX_INCOMING = 10
LOW_SCORE_THRESHOLD = 50

# =============================================================================
# REPORTS
# =============================================================================

ACTION_PLAN_TIMEFRAMES = {
    "aggressive": {"weeks": 4, "tasks_per_week": 8},
    "moderate": {"weeks": 12, "tasks_per_week": 4},
    "gradual": {"weeks": 24, "tasks_per_week": 2},
}
