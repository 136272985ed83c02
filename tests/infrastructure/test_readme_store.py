from __future__ import annotations

from pathlib import Path

import pytest

from portfolio_index.infrastructure.readme_store import ReadmeStore


def test_read_missing_file_returns_none(tmp_path: Path) -> None:
    assert ReadmeStore(str(tmp_path / "README.md")).read() is None


def test_write_then_read(tmp_path: Path) -> None:
    store = ReadmeStore(str(tmp_path / "out" / "README.md"))
    store.write("# 📁 Title\n")

    assert store.read() == "# 📁 Title\n"
    assert [p.name for p in (tmp_path / "out").iterdir()] == ["README.md"]


def test_failed_write_keeps_previous_content(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "README.md"
    path.write_text("previous\n", encoding="utf-8")
    store = ReadmeStore(str(path))

    def failing_replace(*_args, **_kwargs):
        raise OSError("disk full")

    monkeypatch.setattr("portfolio_index.infrastructure.readme_store.os.replace", failing_replace)

    with pytest.raises(OSError):
        store.write("new\n")

    assert path.read_text(encoding="utf-8") == "previous\n"
    assert [p.name for p in tmp_path.iterdir()] == ["README.md"]
