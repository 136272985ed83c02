"""Markdown table format of the repository list.

``render_table`` and ``extract_records`` are a matched pair: every row the
renderer emits is read back by the extractor into an equal ``Record``.
"""

import re
import unicodedata
from datetime import date
from typing import Iterable, List, Optional

from portfolio_index.domain.repository import Record, RecordSet

TABLE_HEADER = "| Repository | Owner | Stars | Last Push |"
TABLE_SEPARATOR = "|------------|-------|-------|-----------|"

ROW_PATTERN = re.compile(
    r"^\| \[(?P<key>[^\[\]]+)\]\((?P<location>https?://[^()\s]+)\)"
    r" \| (?P<owner>[^|]+?)"
    r" \| (?P<popularity>\d+)"
    r" \| (?P<last_activity>\d{4}-\d{2}-\d{2}) \|$"
)


def _base_form(value: str) -> str:
    # Drop accents and case so that only the base letters are compared
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def sort_records(records: Iterable[Record]) -> List[Record]:
    """Order records by key, ignoring case and accents.

    Keys with the same base form fall back to their exact spelling so the
    output does not depend on insertion order.
    """
    return sorted(records, key=lambda record: (_base_form(record.key), record.key))


def render_row(record: Record) -> str:
    return (
        f"| [{record.key}]({record.location}) | {record.owner} "
        f"| {record.popularity} | {record.last_activity.isoformat()} |"
    )


def parse_row(line: str) -> Optional[Record]:
    """Parse one table row, or return None if it is not a data row."""
    match = ROW_PATTERN.match(line.strip())
    if not match:
        return None

    try:
        last_activity = date.fromisoformat(match.group("last_activity"))
    except ValueError:
        # Shaped like a date but not a real one (e.g. 2026-13-40)
        return None

    return Record(
        key=match.group("key"),
        location=match.group("location"),
        owner=match.group("owner"),
        popularity=int(match.group("popularity")),
        last_activity=last_activity,
    )


def extract_records(text: Optional[str]) -> RecordSet:
    """Read every well-formed data row of a previously rendered artifact.

    A missing artifact (``None``) gives an empty set. Header, prose and
    malformed rows are skipped without notice. When a key appears twice the
    later row wins.
    """
    records: RecordSet = {}
    if text is None:
        return records

    for line in text.splitlines():
        record = parse_row(line)
        if record is not None:
            records[record.key] = record
    return records


def render_table(records: RecordSet, title: str, note: Optional[str] = None) -> str:
    """Render the full artifact text for a record set."""
    lines = [title, ""]
    if note:
        lines.extend([note, ""])
    lines.append(TABLE_HEADER)
    lines.append(TABLE_SEPARATOR)
    lines.extend(render_row(record) for record in sort_records(records.values()))
    return "\n".join(lines) + "\n"
