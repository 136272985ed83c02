#!/usr/bin/env python3
"""Script to refresh the README table of portfolio repositories."""

import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from portfolio_index.config import SyncConfig
from portfolio_index.domain.errors import AuthError
from portfolio_index.application.sync_service import SyncService


def _log_level(name):
    """Map a LOG_LEVEL name to a logging level, falling back to INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


logging.basicConfig(
    level=_log_level(os.getenv("LOG_LEVEL", "INFO")),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def main():
    """Fetch matching repositories and rewrite the README table."""
    try:
        config = SyncConfig.from_env()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        service = SyncService.from_config(config)
        report = service.run()

        if not report.content_changed:
            logger.info("README content unchanged")
        logger.info(
            f"Updated README with {report.changed} new or changed repositories "
            f"({report.total} listed)."
        )
        return 0

    except AuthError as e:
        logger.error(str(e))
        return 1
    except Exception as e:
        logger.error(f"Sync failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
