"""Application service running one README synchronization pass."""

import logging
from dataclasses import dataclass

from portfolio_index.application.reconciler import reconcile
from portfolio_index.config import SyncConfig
from portfolio_index.domain.readme_table import extract_records, render_table
from portfolio_index.infrastructure.github_client import GitHubSearchClient
from portfolio_index.infrastructure.readme_store import ReadmeStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncReport:
    """Summary of a finished run."""

    fetched: int
    added: int
    updated: int
    unchanged: int
    retained: int
    total: int
    output_path: str
    content_changed: bool

    @property
    def changed(self) -> int:
        return self.added + self.updated


class SyncService:
    """Fetches matching repositories and rewrites the markdown table."""

    def __init__(
        self,
        config: SyncConfig,
        github_client: GitHubSearchClient,
        readme_store: ReadmeStore
    ):
        """
        Initialize sync service.

        Args:
            config: Run configuration
            github_client: Search client used to fetch fresh records
            readme_store: Storage of the rendered artifact
        """
        self.config = config
        self.github_client = github_client
        self.readme_store = readme_store

    @classmethod
    def from_config(cls, config: SyncConfig) -> "SyncService":
        """
        Wire the default collaborators for ``config``.

        Raises:
            AuthError: If no token is configured. No I/O has happened yet.
        """
        github_client = GitHubSearchClient(config)
        return cls(config, github_client, ReadmeStore(config.output_path))

    def run(self) -> SyncReport:
        """
        Run one pass: read, fetch, merge, render, write.

        The artifact is written only after the whole record set has been
        built, so any failure before that leaves it untouched.

        Returns:
            SyncReport describing the run
        """
        logger.info(f"Starting sync with query: {self.config.query}")

        previous_text = self.readme_store.read()
        base = extract_records(previous_text)
        logger.info(f"Loaded {len(base)} repositories from {self.readme_store.path}")

        fresh = self.github_client.fetch_all()
        logger.info(f"Fetched {len(fresh)} repositories from GitHub")

        result = reconcile(base, fresh)

        text = render_table(result.records, self.config.title, self.config.note)
        self.readme_store.write(text)

        report = SyncReport(
            fetched=len(fresh),
            added=result.added,
            updated=result.updated,
            unchanged=result.unchanged,
            retained=result.retained,
            total=len(result.records),
            output_path=self.readme_store.path,
            content_changed=text != previous_text,
        )
        logger.info(
            f"Updated {report.output_path} with {report.changed} new or changed repositories "
            f"({report.total} total)"
        )
        return report
