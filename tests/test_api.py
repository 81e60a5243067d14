"""Tests for the module-level confmap functions."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Callable

import pytest

import confmap


@pytest.mark.unit
def test_readme_example(write_config: Callable[..., Path], config_dir: Path) -> None:
    write_config(
        {
            "testGetString": "YesMan",
            "testGetInt64": 43,
            "testGetStringArray": ["+44 1234567", "+44 2345678"],
        }
    )
    confmap.add_search_path(str(config_dir))
    confmap.set_file_name("config.json")
    assert confmap.load() is confmap.LoadStatus.LOADED

    assert confmap.get_string("testGetString") == "YesMan"
    assert confmap.get_int64("testGetInt64") == 43
    assert confmap.get_string_array("testGetStringArray") == ["+44 1234567", "+44 2345678"]


@pytest.mark.unit
def test_load_before_set_file_name() -> None:
    assert confmap.load() is confmap.LoadStatus.NOT_CONFIGURED
    assert confmap.default_store().keys() == []
    assert confmap.get("anything") is None


@pytest.mark.unit
def test_functions_share_default_store(write_config: Callable[..., Path], config_dir: Path) -> None:
    write_config({"a": 1})
    confmap.set_file_name("config.json")
    confmap.add_search_path(str(config_dir))
    confmap.load()
    store = confmap.default_store()
    assert store.file_name == "config.json"
    assert store.get_int64("a") == 1


@pytest.mark.unit
def test_reset_replaces_default_store() -> None:
    before = confmap.default_store()
    confmap._reset()
    assert confmap.default_store() is not before


@pytest.mark.unit
def test_all_accessors(write_config: Callable[..., Path], config_dir: Path) -> None:
    write_config(
        {
            "s": "text",
            "b": False,
            "i": 200,
            "f": 1.25,
            "sa": ["p", 1, "q"],
            "ia": [1, "2", 3],
            "fa": [1, 2.5, "x"],
            "arr": [{"k": 1}, 2],
            "map": {"k": [1, 2]},
        }
    )
    confmap.set_file_name("config.json")
    confmap.add_search_path(str(config_dir))
    confmap.load(strict=True)

    assert confmap.get("s") == "text"
    assert confmap.get_string("s") == "text"
    assert confmap.get_bool("b") is False
    assert confmap.get_int8("i") == -56
    assert confmap.get_int16("i") == 200
    assert confmap.get_int32("i") == 200
    assert confmap.get_int64("i") == 200
    assert confmap.get_float32("f") == 1.25
    assert confmap.get_float64("f") == 1.25
    assert confmap.get_string_array("sa") == ["p", "q"]
    assert confmap.get_int_array("ia") == [1, 3]
    assert confmap.get_float_array("fa") == [1.0, 2.5]
    assert confmap.get_array("arr") == [{"k": 1}]
    assert confmap.get_map("map") == {"k": [1, 2]}


@pytest.mark.unit
def test_strict_load_raises(tmp_path: Path) -> None:
    confmap.set_file_name("config.json")
    confmap.add_search_path(str(tmp_path / "missing"))
    with pytest.raises(confmap.ConfigFileNotFoundError):
        confmap.load(strict=True)


@pytest.mark.unit
def test_concurrent_loads_keep_merged_keys(write_config: Callable[..., Path], config_dir: Path) -> None:
    path = write_config({"a": "x", "b": 1})
    confmap.set_file_name("config.json")
    confmap.add_search_path(str(config_dir))
    confmap.load()
    path.write_text('{"a": "y"}', encoding="utf-8")

    threads = [threading.Thread(target=confmap.load) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert confmap.get_string("a") == "y"
    assert confmap.get_int64("b") == 1
