"""Domain entities for tracked GitHub repositories."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class Record:
    """Immutable entry of the repository table.

    ``key`` is the repository name. Identity is case-sensitive, only the
    rendered order ignores case.
    """

    key: str
    location: str
    owner: str
    popularity: int
    last_activity: date

    @classmethod
    def from_search_item(cls, item: Mapping[str, Any]) -> "Record":
        """Build a record from one item of a search API response."""
        pushed = item.get("pushed_at") or item["updated_at"]
        # Time of day is not kept
        last_activity = datetime.fromisoformat(pushed.replace("Z", "+00:00")).date()

        return cls(
            key=item["name"],
            location=item["html_url"],
            owner=item["owner"]["login"],
            popularity=int(item.get("stargazers_count") or 0),
            last_activity=last_activity,
        )


# Records keyed by ``Record.key``
RecordSet = Dict[str, Record]
