"""Shared test fixtures for the confmap test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

import confmap
from confmap.store import ConfigStore


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")


@pytest.fixture
def sample_document() -> dict[str, Any]:
    return {
        "testGetString": "YesMan",
        "testGetInt64": 43,
        "testGetStringArray": ["+44 1234567", "+44 2345678"],
        "testGetBool": True,
        "testGetFloat64": 3.5,
        "testGetMixedArray": ["p", 1, "q", None, 2.5, {"k": "v"}],
        "testGetArray": [{"name": "a"}, 7, {"name": "b"}, [1]],
        "testGetMap": {"host": "localhost", "port": 8080, "tags": ["x"]},
        "testGetNull": None,
    }


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    d = tmp_path / "conf"
    d.mkdir()
    return d


@pytest.fixture
def write_config(config_dir: Path) -> Callable[..., Path]:
    """Factory writing a config file into ``config_dir``; pass a dict or raw text."""

    def _write(content: Any, name: str = "config.json", directory: Path | None = None) -> Path:
        target = (directory or config_dir) / name
        text = content if isinstance(content, str) else json.dumps(content)
        target.write_text(text, encoding="utf-8")
        return target

    return _write


@pytest.fixture(autouse=True)
def program_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the fallback scan at an empty directory instead of the real program's."""
    d = tmp_path / "program"
    d.mkdir()
    monkeypatch.setattr("confmap.locate.executable_dir", lambda: d)
    return d


@pytest.fixture(autouse=True)
def fresh_default_store() -> None:
    confmap._reset()


@pytest.fixture
def loaded_store(write_config: Callable[..., Path], config_dir: Path, sample_document: dict[str, Any]) -> ConfigStore:
    write_config(sample_document)
    store = ConfigStore(file_name="config.json", search_path=str(config_dir))
    assert store.load() is confmap.LoadStatus.LOADED
    return store
