from __future__ import annotations

from datetime import date

import pytest

from portfolio_index.domain.repository import Record


def test_from_search_item_drops_time_of_day(make_item) -> None:
    record = Record.from_search_item(make_item("alpha-portfolio", stars=7, pushed="2026-03-01T23:59:59Z", owner="dev"))

    assert record == Record(
        key="alpha-portfolio",
        location="https://github.com/dev/alpha-portfolio",
        owner="dev",
        popularity=7,
        last_activity=date(2026, 3, 1),
    )


def test_from_search_item_falls_back_to_updated_at(make_item) -> None:
    item = make_item("x-portfolio")
    item["pushed_at"] = None
    item["updated_at"] = "2026-05-06T01:02:03Z"

    assert Record.from_search_item(item).last_activity == date(2026, 5, 6)


def test_record_is_immutable(make_item) -> None:
    record = Record.from_search_item(make_item("x-portfolio"))
    with pytest.raises(AttributeError):
        record.popularity = 99  # type: ignore[misc]
