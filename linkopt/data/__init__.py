"""Data package: page models, preferences, CSV loading and the page store.

Public re-exports so callers can write::

    from linkopt.data import PageStore, BusinessPreferences
"""

from linkopt.data.loader import extract_slug, load_rows, parse_row, parse_rows
from linkopt.data.models import PageRecord, ScoredPage, SiteAnalysis, TopicCluster
from linkopt.data.preferences import BusinessPreferences, load_preferences, merge_preferences
from linkopt.data.store import PageStore

__all__ = [
    "BusinessPreferences",
    "PageRecord",
    "PageStore",
    "ScoredPage",
    "SiteAnalysis",
    "TopicCluster",
    "extract_slug",
    "load_preferences",
    "load_rows",
    "merge_preferences",
    "parse_row",
    "parse_rows",
]
