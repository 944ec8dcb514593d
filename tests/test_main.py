from pathlib import Path

import pytest

from recency_cache.cache import LRUCache
from recency_cache.config import CONFIG_ENV_VAR
from recency_cache.export import save_export
from recency_cache.main import main


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.json"))


def test_main_describes_export(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cache = LRUCache(3)
    cache.put("a", 1)
    cache.put("b", 2)
    path = tmp_path / "export.json"
    save_export(cache, path)

    assert main([str(path), "--capacity", "3"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["a:1 < b:2", "size=2 capacity=3"]


def test_main_reports_unreadable_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "nope.json")]) == 1
    assert "error:" in capsys.readouterr().err


def test_main_reports_bad_capacity(tmp_path: Path) -> None:
    path = tmp_path / "export.json"
    path.write_text("[]", encoding="utf-8")
    assert main([str(path), "--capacity", "0"]) == 1
