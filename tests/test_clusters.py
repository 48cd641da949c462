"""Tests for topic cluster detection."""

from __future__ import annotations

from conftest import make_page
from linkopt.scoring.classifier import classify_pages
from linkopt.scoring.clusters import ClusterRule, build_cluster, detect_clusters


def _commercial_pages():
    return classify_pages([
        make_page("https://nae.example/bank-cleaning/", ilr=96),
        make_page("https://nae.example/medical-facility-cleaning/", ilr=99),
        make_page("https://nae.example/office-building-cleaning/", ilr=97),
        make_page("https://nae.example/school-cleaning/", ilr=95),
    ])


class TestCommercialCluster:
    def test_preferred_hub_wins_over_higher_ilr(self):
        clusters = detect_clusters(_commercial_pages())
        commercial = next(c for c in clusters if c.name == "Commercial Cleaning Services")
        assert commercial.hub.slug == "office-building-cleaning"
        assert commercial.type == "service-cluster"

    def test_spokes_exclude_hub_and_follow_ilr(self):
        commercial = detect_clusters(_commercial_pages())[0]
        assert commercial.hub.url not in [s.url for s in commercial.spokes]
        assert [s.ilr for s in commercial.spokes] == [99, 96, 95]

    def test_hub_without_preferred_keyword_is_highest_ilr(self):
        pages = classify_pages([
            make_page("https://nae.example/bank-cleaning/", ilr=96),
            make_page("https://nae.example/medical-facility-cleaning/", ilr=99),
        ])
        commercial = detect_clusters(pages)[0]
        assert commercial.hub.slug == "medical-facility-cleaning"

    def test_input_order_does_not_change_hub(self):
        pages = _commercial_pages()
        forward = detect_clusters(pages)[0]
        backward = detect_clusters(list(reversed(pages)))[0]
        assert forward.hub.url == backward.hub.url


class TestContentCluster:
    def test_caps_spokes_at_five(self):
        pages = classify_pages([
            make_page(f"https://nae.example/blog/post-{i}/", ilr=40 + i) for i in range(8)
        ])
        content = next(c for c in detect_clusters(pages) if c.type == "content-cluster")
        assert content.hub.ilr == 47
        assert len(content.spokes) == 5

    def test_min_ilr_is_strict(self):
        pages = classify_pages([
            make_page("https://nae.example/blog/a/", ilr=30),
            make_page("https://nae.example/blog/b/", ilr=31),
        ])
        content = detect_clusters(pages)[0]
        assert content.hub.ilr == 31
        assert content.spokes == []


class TestDetectClusters:
    def test_empty_input(self):
        assert detect_clusters([]) == []

    def test_no_matches(self):
        pages = classify_pages([make_page("https://nae.example/careers/", ilr=10)])
        assert detect_clusters(pages) == []

    def test_supporting_cluster(self):
        pages = classify_pages([
            make_page("https://nae.example/day-porter-services/", ilr=80),
            make_page("https://nae.example/carpet-cleaning/", ilr=85),
        ])
        supporting = detect_clusters(pages)[0]
        assert supporting.name == "Supporting Services & Solutions"
        assert supporting.hub.slug == "carpet-cleaning"
        assert supporting.contains("https://nae.example/day-porter-services/")
        assert supporting.is_hub("https://nae.example/carpet-cleaning/")

    def test_custom_rule(self):
        rule = ClusterRule(name="Careers", type="custom", keywords=("career",))
        pages = [make_page("https://nae.example/careers/"), make_page("https://nae.example/jobs/")]
        cluster = build_cluster(rule, pages)
        assert cluster is not None
        assert cluster.members == [pages[0]]


class TestClusterInvariants:
    def test_three_page_commercial_scenario(self):
        pages = classify_pages([
            make_page("https://nae.example/bank-cleaning/", ilr=97),
            make_page("https://nae.example/medical-facility-cleaning/", ilr=96),
            make_page("https://nae.example/office-building-cleaning/", ilr=90),
        ])
        for ordering in (pages, list(reversed(pages)), [pages[1], pages[2], pages[0]]):
            commercial = detect_clusters(ordering)[0]
            assert commercial.hub.slug == "office-building-cleaning"
            assert len(commercial.spokes) == 2

    def test_idempotent_and_hub_never_a_spoke(self, sample_csv):
        from linkopt.data.store import PageStore

        pages = PageStore.from_csv(sample_csv).pages
        first = detect_clusters(pages)
        assert detect_clusters(pages) == first
        for cluster in first:
            assert cluster.hub.url not in {s.url for s in cluster.spokes}
