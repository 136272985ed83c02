"""Run configuration for the repository table sync."""

import os
from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional

DEFAULT_API_URL = "https://api.github.com"
MAX_PAGE_SIZE = 100  # GitHub search API limit per page
MAX_SEARCH_RESULTS = 1000  # Search API serves no results past this offset


def _parse_date(name: str, value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"{name} must be a YYYY-MM-DD date, got {value!r}") from None


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _parse_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


@dataclass(frozen=True)
class SyncConfig:
    """Settings of one synchronization run."""

    token: Optional[str] = None
    name_filter: str = "portfolio"
    start_date: date = date(2026, 1, 1)
    end_date: date = date(2026, 12, 31)
    page_size: int = MAX_PAGE_SIZE
    max_pages: int = 10
    output_path: str = "README.md"
    api_url: str = DEFAULT_API_URL
    request_timeout: float = 30

    def __post_init__(self):
        if self.start_date > self.end_date:
            raise ValueError(
                f"START_DATE {self.start_date} is after END_DATE {self.end_date}"
            )
        if self.max_pages < 1:
            raise ValueError("MAX_PAGES must be at least 1")
        if not self.name_filter.strip():
            raise ValueError("NAME_FILTER must not be empty")
        if not self.request_timeout > 0:
            raise ValueError("REQUEST_TIMEOUT must be greater than 0")
        # Search API refuses per_page above 100
        page_size = max(1, min(self.page_size, MAX_PAGE_SIZE))
        object.__setattr__(self, "page_size", page_size)
        object.__setattr__(self, "max_pages", min(self.max_pages, MAX_SEARCH_RESULTS // page_size))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SyncConfig":
        """
        Load configuration from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Raises:
            ValueError: If a date or number cannot be parsed.
        """
        if environ is None:
            environ = os.environ

        token = (environ.get("GITHUB_TOKEN") or "").strip() or None

        return cls(
            token=token,
            name_filter=environ.get("NAME_FILTER", "portfolio"),
            start_date=_parse_date("START_DATE", environ.get("START_DATE", "2026-01-01")),
            end_date=_parse_date("END_DATE", environ.get("END_DATE", "2026-12-31")),
            page_size=_parse_int("PAGE_SIZE", environ.get("PAGE_SIZE", str(MAX_PAGE_SIZE))),
            max_pages=_parse_int("MAX_PAGES", environ.get("MAX_PAGES", "10")),
            output_path=environ.get("OUTPUT_PATH", "README.md"),
            api_url=environ.get("GITHUB_API_URL", DEFAULT_API_URL).rstrip("/"),
            request_timeout=_parse_float("REQUEST_TIMEOUT", environ.get("REQUEST_TIMEOUT", "30")),
        )

    @property
    def query(self) -> str:
        """Search expression sent as the ``q`` parameter."""
        return (
            f"{self.name_filter} in:name "
            f"pushed:{self.start_date.isoformat()}..{self.end_date.isoformat()} fork:false"
        )

    @property
    def title(self) -> str:
        if self.start_date.year == self.end_date.year:
            years = str(self.start_date.year)
        else:
            years = f"{self.start_date.year}–{self.end_date.year}"
        return f"# 📁 {self.name_filter.strip().title()} Repositories ({years})"

    @property
    def note(self) -> str:
        return (
            f"> Public, non-fork repositories with \"{self.name_filter.strip()}\" in their name, "
            f"pushed between {self.start_date.isoformat()} and {self.end_date.isoformat()}. "
            "Updated automatically; entries are refreshed but never removed."
        )
