"""Centralised settings for the internal linking optimizer.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

Scoring tables are not settings; they live in
:mod:`linkopt.scoring.constants`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Input / output locations
    # ------------------------------------------------------------------
    data_file: Path = field(
        default_factory=lambda: Path(
            os.environ.get("LINKOPT_DATA_FILE", Path("data") / "pages.csv")
        )
    )
    reports_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("LINKOPT_REPORTS_DIR", "reports"))
    )

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------
    open_browser: bool = field(
        default_factory=lambda: _env_flag("LINKOPT_OPEN_BROWSER", "1")
    )

    # ------------------------------------------------------------------
    # Page search
    # ------------------------------------------------------------------
    search_limit: int = field(
        default_factory=lambda: int(os.environ.get("LINKOPT_SEARCH_LIMIT", "15"))
    )
    search_all_limit: int = field(
        default_factory=lambda: int(os.environ.get("LINKOPT_SEARCH_ALL_LIMIT", "100"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LINKOPT_LOG_LEVEL", "WARNING").upper()
    )

    def ensure_reports_dir(self) -> Path:
        """Create the reports directory if it does not exist and return it."""
        self.reports_dir.mkdir(parents=True, exist_ok=True)
        return self.reports_dir


# Module-level singleton, import this everywhere:
#   from linkopt.config import settings
settings = Settings()
