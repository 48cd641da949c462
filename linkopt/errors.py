"""Exceptions raised by the linkopt library."""

from __future__ import annotations


class LinkOptError(Exception):
    """Base class for all linkopt errors."""


class DatasetNotFoundError(LinkOptError):
    """The crawl export CSV does not exist."""

    def __init__(self, path) -> None:
        super().__init__(f"CSV file not found at: {path}")
        self.path = path


class UnclassifiedPageError(LinkOptError):
    """A page reached the scorer without a tier.

    Classification always runs before scoring, so this signals a
    programming error rather than bad input.
    """

    def __init__(self, url: str) -> None:
        super().__init__(f"Page has no tier assigned: {url!r}")
        self.url = url


class PreferencesError(LinkOptError):
    """Business preferences could not be read or validated."""
