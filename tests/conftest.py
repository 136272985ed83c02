"""Shared fixtures: search API items, a fake GitHub endpoint and run configs."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any, Callable

import pytest

from portfolio_index.config import SyncConfig
from portfolio_index.infrastructure import github_client


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, status_code: int = 200, payload: Any = None, text: str = "", headers: dict | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text
        self.headers = headers or {}

    def json(self) -> Any:
        return self._payload


class FakeGitHub:
    """Serves queued responses and records every request made."""

    def __init__(self) -> None:
        self.responses: list[FakeResponse] = []
        self.calls: list[dict[str, Any]] = []

    def add_page(self, items: list[dict[str, Any]]) -> None:
        self.responses.append(
            FakeResponse(200, {"total_count": len(items), "items": items}, headers={"X-RateLimit-Remaining": "29"})
        )

    def add_error(self, status_code: int, text: str) -> None:
        self.responses.append(FakeResponse(status_code, None, text=text))

    def get(self, url: str, params: dict | None = None, headers: dict | None = None, timeout: float | None = None) -> FakeResponse:
        self.calls.append({"url": url, "params": dict(params or {}), "headers": dict(headers or {}), "timeout": timeout})
        if not self.responses:
            raise AssertionError(f"unexpected request for page {(params or {}).get('page')}")
        return self.responses.pop(0)

    @property
    def pages_requested(self) -> list[int]:
        return [call["params"]["page"] for call in self.calls]


@pytest.fixture
def make_item() -> Callable[..., dict[str, Any]]:
    def _builder(name: str, stars: int = 0, pushed: str = "2026-03-01T12:34:56Z", owner: str = "octocat") -> dict[str, Any]:
        return {
            "name": name,
            "full_name": f"{owner}/{name}",
            "html_url": f"https://github.com/{owner}/{name}",
            "owner": {"login": owner},
            "stargazers_count": stars,
            "pushed_at": pushed,
            "updated_at": pushed,
            "fork": False,
        }

    return _builder


@pytest.fixture
def fake_github(monkeypatch: pytest.MonkeyPatch) -> FakeGitHub:
    fake = FakeGitHub()
    monkeypatch.setattr(github_client.requests, "get", fake.get)
    return fake


@pytest.fixture
def sync_config(tmp_path: Path) -> SyncConfig:
    return SyncConfig(
        token="test-token",
        start_date=date(2026, 1, 1),
        end_date=date(2026, 12, 31),
        output_path=str(tmp_path / "README.md"),
    )
