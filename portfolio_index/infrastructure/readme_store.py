"""File storage for the rendered repository table."""

import logging
import os
import tempfile
from typing import Optional

logger = logging.getLogger(__name__)


class ReadmeStore:
    """Reads and overwrites the single markdown artifact."""

    def __init__(self, path: str):
        self.path = path

    def read(self) -> Optional[str]:
        """Return the current artifact text, or None if the file does not exist."""
        if not os.path.exists(self.path):
            logger.info(f"{self.path} does not exist yet, starting from an empty list")
            return None

        with open(self.path, "r", encoding="utf-8") as f:
            return f.read()

    def write(self, text: str):
        """
        Replace the artifact with ``text``.

        The content goes to a temporary file next to the target first, so the
        previous artifact stays intact if writing fails.
        """
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(prefix=".tmp-", suffix=".md", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(text)
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

        logger.info(f"Wrote {self.path}")
