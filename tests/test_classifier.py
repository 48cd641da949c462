"""Tests for page typing, tier policies and the tier partition."""

from __future__ import annotations

import pytest

from conftest import make_page
from linkopt.scoring.classifier import (
    KEYWORD_POLICY,
    SCORING_POLICY,
    categorize_tier,
    classify_page,
    classify_pages,
    determine_page_type,
    partition_by_tier,
    sort_by_ilr,
)


class TestDeterminePageType:
    @pytest.mark.parametrize("url, title, expected", [
        ("https://nae.example/bank-cleaning/", "Bank Cleaning", "service"),
        ("https://nae.example/office-building-cleaning/", "Offices", "service"),
        ("https://nae.example/about-us/", "About", "supporting"),
        ("https://nae.example/contact/", "Contact", "supporting"),
        ("https://nae.example/blog/anything/", "Something", "blog"),
        ("https://nae.example/recent-blog/post/", "Post", "blog"),
        ("https://nae.example/post/", "Five Cleaning Tips", "blog"),
        ("https://nae.example/post/", "The Ultimate GUIDE", "blog"),
        ("https://nae.example/careers/", "Careers", "other"),
    ])
    def test_types(self, url, title, expected):
        assert determine_page_type(url, title) == expected

    def test_missing_title_is_other(self):
        assert determine_page_type("https://nae.example/bank-cleaning/", "") == "other"
        assert determine_page_type(None, "Bank Cleaning") == "other"

    def test_service_wins_over_blog(self):
        assert determine_page_type("https://nae.example/blog/bank-cleaning/", "Tips") == "service"


class TestScoringPolicy:
    def test_service_at_threshold_is_money(self):
        page = make_page("https://nae.example/bank-cleaning/", ilr=95)
        assert categorize_tier(page, SCORING_POLICY) == "money"

    def test_service_just_below_threshold_is_supporting(self):
        page = make_page("https://nae.example/bank-cleaning/", ilr=94.9)
        assert categorize_tier(page, SCORING_POLICY) == "supporting"

    def test_supporting_type_is_supporting_regardless_of_ilr(self):
        page = make_page("https://nae.example/about-us/", ilr=5)
        assert categorize_tier(page, SCORING_POLICY) == "supporting"

    def test_high_ilr_blog_is_not_money(self):
        page = make_page("https://nae.example/blog/post/", ilr=99)
        assert categorize_tier(page, SCORING_POLICY) == "traffic"

    def test_mid_ilr_other_is_supporting(self):
        page = make_page("https://nae.example/careers/", ilr=70)
        assert categorize_tier(page, SCORING_POLICY) == "supporting"

    def test_low_ilr_other_is_traffic(self):
        page = make_page("https://nae.example/careers/", ilr=69.9)
        assert categorize_tier(page, SCORING_POLICY) == "traffic"


class TestKeywordPolicy:
    def test_service_keyword_is_money_even_with_low_ilr(self):
        page = make_page("https://nae.example/bank-cleaning/", ilr=10)
        assert categorize_tier(page, KEYWORD_POLICY) == "money"

    def test_supporting_keyword(self):
        page = make_page("https://nae.example/about-us/", ilr=99)
        assert categorize_tier(page, KEYWORD_POLICY) == "supporting"

    @pytest.mark.parametrize("ilr, expected", [(96, "money"), (95, "money"), (80, "supporting"), (50, "traffic")])
    def test_ilr_fallback_ignores_type(self, ilr, expected):
        page = make_page("https://nae.example/blog/post/", ilr=ilr)
        assert categorize_tier(page, KEYWORD_POLICY) == expected


class TestClassifyPage:
    def test_returns_annotated_copy(self):
        page = make_page("https://nae.example/bank-cleaning/", ilr=97)
        classified = classify_page(page)
        assert classified.page_type == "service"
        assert classified.tier == "money"
        assert page.tier is None
        assert page.page_type is None

    def test_classify_pages_keeps_order(self):
        pages = [make_page(f"https://nae.example/p{i}/", ilr=i * 10) for i in range(5)]
        classified = classify_pages(pages)
        assert [p.url for p in classified] == [p.url for p in pages]

    def test_idempotent(self):
        page = classify_page(make_page("https://nae.example/about-us/", ilr=10))
        assert classify_page(page) == page


class TestPartition:
    def test_each_page_in_exactly_one_tier(self):
        pages = classify_pages([
            make_page("https://nae.example/bank-cleaning/", ilr=99),
            make_page("https://nae.example/about-us/", ilr=40),
            make_page("https://nae.example/blog/a/", ilr=20),
            make_page("https://nae.example/careers/", ilr=75),
        ])
        partition = partition_by_tier(pages)
        assert len(partition) == len(pages)
        assert partition.counts() == {"money": 1, "supporting": 2, "traffic": 1}

    def test_tiers_sorted_by_ilr(self):
        pages = classify_pages([
            make_page("https://nae.example/blog/a/", ilr=10),
            make_page("https://nae.example/blog/b/", ilr=60),
            make_page("https://nae.example/blog/c/", ilr=30),
        ])
        partition = partition_by_tier(pages)
        assert [p.ilr for p in partition.traffic] == [60, 30, 10]

    def test_unclassified_page_goes_to_traffic(self):
        partition = partition_by_tier([make_page()])
        assert len(partition.traffic) == 1

    def test_sort_by_ilr_is_stable(self):
        a = make_page("https://nae.example/a/", ilr=50)
        b = make_page("https://nae.example/b/", ilr=50)
        assert sort_by_ilr([a, b]) == [a, b]
