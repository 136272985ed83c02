"""Merging of freshly fetched records into the existing table."""

import logging
from dataclasses import dataclass
from typing import Iterable

from portfolio_index.domain.repository import Record, RecordSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MergeResult:
    """Outcome of a merge.

    ``retained`` counts base records that were not fetched again; they are
    kept as they are.
    """

    records: RecordSet
    added: int = 0
    updated: int = 0
    unchanged: int = 0
    retained: int = 0

    @property
    def changed(self) -> int:
        return self.added + self.updated


def reconcile(base: RecordSet, fresh: Iterable[Record]) -> MergeResult:
    """
    Merge fetched records into a copy of ``base``.

    A fetched record always replaces the stored record with the same key.
    If several fetched records share a key, the last one processed wins.
    Nothing is ever removed.

    Args:
        base: Records read back from the current artifact. Not modified.
        fresh: Records in fetch order.

    Returns:
        MergeResult with the merged set and per-key counts
    """
    merged: RecordSet = dict(base)
    latest: RecordSet = {}
    for record in fresh:
        latest[record.key] = record

    added = updated = unchanged = 0
    for key, record in latest.items():
        previous = base.get(key)
        if previous is None:
            added += 1
        elif previous != record:
            updated += 1
        else:
            unchanged += 1
        merged[key] = record

    retained = sum(1 for key in base if key not in latest)

    logger.info(
        f"Merged {len(latest)} fetched repositories: {added} new, {updated} updated, "
        f"{unchanged} unchanged, {retained} kept from the existing list"
    )
    return MergeResult(
        records=merged,
        added=added,
        updated=updated,
        unchanged=unchanged,
        retained=retained,
    )
