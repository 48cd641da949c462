"""Shared helpers for CLI commands: dataset loading and error exits."""

from __future__ import annotations

import logging
from functools import wraps
from pathlib import Path
from typing import Callable, Optional

import typer

from linkopt.config import settings
from linkopt.data.store import PageStore
from linkopt.errors import LinkOptError
from linkopt.scoring.classifier import SCORING_POLICY, TierPolicy

logger = logging.getLogger(__name__)


def resolve_data_file(path: Optional[Path]) -> Path:
    """Return ``path`` or the configured default crawl export."""
    return Path(path) if path is not None else settings.data_file


def load_store(path: Optional[Path], policy: TierPolicy = SCORING_POLICY) -> PageStore:
    csv_path = resolve_data_file(path)
    logger.debug("Loading crawl export from %s with %s policy", csv_path, policy.name)
    return PageStore.from_csv(csv_path, policy)


def exit_on_error(func: Callable) -> Callable:
    """Decorator for CLI commands: report a LinkOptError and exit with code 1."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except LinkOptError as exc:
            typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)

    return wrapper
