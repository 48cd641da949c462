"""Tests for per-page sub-scores, totals and recommendations."""

from __future__ import annotations

import pytest

from conftest import make_page
from linkopt.data.models import TopicCluster
from linkopt.errors import UnclassifiedPageError
from linkopt.scoring.scorer import (
    PageScorer,
    cluster_score,
    content_score,
    link_score,
    outgoing_balance,
    technical_score,
    tier_score,
)
from linkopt.scoring.utils import get_grade, round_half_up


@pytest.fixture
def strong_money_page():
    return make_page(
        "https://nae.example/some-page/",
        title="30+ char descriptive title here",
        description="x" * 120,
        ilr=95,
        incoming_links=50,
        outgoing_links=15,
        crawl_depth=1,
        page_type="service",
        tier="money",
    )


class TestTotals:
    def test_strong_money_page_scores_87_a(self, strong_money_page):
        scored = PageScorer().score(strong_money_page)
        assert scored.total == 87
        assert scored.grade == "A"
        assert scored.breakdown.link_score == 83
        assert scored.breakdown.tier_score == 100
        assert scored.breakdown.technical_score == 100
        assert scored.breakdown.content_score == 100
        assert scored.breakdown.cluster_score == 50

    def test_only_cluster_recommendation_when_unclustered(self, strong_money_page):
        recs = PageScorer().score(strong_money_page).recommendations
        assert [r.type for r in recs] == ["cluster"]
        assert recs[0].priority == "low"

    def test_cluster_hub_raises_total(self, strong_money_page):
        cluster = TopicCluster(name="c", type="service-cluster", hub=strong_money_page)
        scored = PageScorer([cluster]).score(strong_money_page)
        assert scored.breakdown.cluster_score == 100
        assert scored.total == 95
        assert scored.grade == "A+"

    def test_unclassified_page_raises(self):
        with pytest.raises(UnclassifiedPageError):
            PageScorer().score(make_page())

    def test_score_all_preserves_order(self):
        pages = [make_page(f"https://nae.example/p{i}/", tier="traffic") for i in range(3)]
        assert [s.page.url for s in PageScorer().score_all(pages)] == [p.url for p in pages]

    def test_total_stays_in_range(self):
        awful = make_page(
            "https://nae.example/",
            title="", description="", ilr=0, incoming_links=0, outgoing_links=200,
            crawl_depth=9, http_status=500, load_time=30, issues=40, in_sitemap=False,
            tier="money",
        )
        scored = PageScorer().score(awful)
        assert 0 <= scored.total <= 100
        assert scored.grade == "F"


class TestSubScores:
    def test_outgoing_balance_peaks_at_ideal(self):
        assert outgoing_balance(make_page(tier="traffic", outgoing_links=35)) == 20
        assert outgoing_balance(make_page(tier="traffic", outgoing_links=25)) == 15
        assert outgoing_balance(make_page(tier="traffic", outgoing_links=100)) == 0

    def test_outgoing_balance_unknown_tier_uses_default(self):
        assert outgoing_balance(make_page(outgoing_links=25)) == 20

    def test_link_score_caps_at_100(self):
        page = make_page(tier="money", ilr=100, incoming_links=500, outgoing_links=15)
        assert link_score(page) == 100

    def test_tier_score_over_linked_keeps_half(self):
        page = make_page(tier="money", ilr=95, incoming_links=200)
        assert tier_score(page) == 75

    def test_tier_score_under_linked_scales(self):
        page = make_page(tier="supporting", ilr=35, incoming_links=15)
        assert tier_score(page) == pytest.approx(25 + 25)

    def test_tier_score_unknown_tier(self):
        assert tier_score(make_page()) == 50

    def test_technical_penalties_accumulate(self):
        page = make_page(http_status=404, load_time=5, issues=20, in_sitemap=False)
        assert technical_score(page) == 15

    def test_technical_score_floor(self):
        page = make_page(http_status=500, load_time=60, issues=99, in_sitemap=False)
        assert technical_score(page) == 0

    def test_content_score_components(self):
        page = make_page(
            "https://nae.example/plain/",
            title="Short title!", description="d" * 60, crawl_depth=2,
        )
        # title >10 (30), description >50 (30), no hyphen, depth 2 (10)
        assert content_score(page) == 70

    def test_cluster_score(self):
        assert cluster_score(make_page("u1"), {"u1"}, {"u1"}) == 100
        assert cluster_score(make_page("u1"), {"u1"}, set()) == 80
        assert cluster_score(make_page("u1"), set(), set()) == 50


class TestRecommendations:
    def test_technical_recommendations_are_high(self):
        page = make_page(tier="traffic", http_status=404, load_time=5, issues=3, in_sitemap=False)
        recs = PageScorer().score(page).recommendations
        technical = [r for r in recs if r.type == "technical"]
        assert {r.priority for r in technical} == {"high"}
        actions = " | ".join(r.action for r in technical)
        assert "currently 5.00s" in actions
        assert "Fix 3 technical issues" in actions
        assert "currently 404" in actions
        assert "XML sitemap" in actions

    def test_weak_links_recommendation_counts_missing_links(self):
        page = make_page(tier="traffic", ilr=10, incoming_links=4, outgoing_links=100)
        recs = PageScorer().score(page).recommendations
        assert recs[0].action == "Add 6 more internal links to this page"

    def test_sorted_high_to_low(self):
        page = make_page(
            "https://nae.example/x",
            title="x", description="", tier="traffic", ilr=10, incoming_links=0,
            in_sitemap=False,
        )
        order = {"high": 3, "medium": 2, "low": 1}
        priorities = [order[r.priority] for r in PageScorer().score(page).recommendations]
        assert priorities == sorted(priorities, reverse=True)


class TestUtils:
    @pytest.mark.parametrize("value, expected", [(86.5, 87), (86.49, 86), (0.5, 1), (2.5, 3)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_round_half_up_digits(self):
        assert round_half_up(1.125, 2) == pytest.approx(1.13)

    @pytest.mark.parametrize("score, grade", [
        (100, "A+"), (90, "A+"), (89, "A"), (80, "A"), (79, "B"), (60, "C"), (50, "D"), (49, "F"), (0, "F"),
    ])
    def test_grades(self, score, grade):
        assert get_grade(score) == grade
