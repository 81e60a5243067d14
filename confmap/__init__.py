"""confmap: read a JSON config file once and look values up by key.

Typical use::

    import confmap

    confmap.add_search_path("/etc/myapp")
    confmap.set_file_name("config.json")
    confmap.load()

    confmap.get_string("testGetString")
    confmap.get_int64("testGetInt64")

The module-level functions act on one process-wide ``ConfigStore``. Lookups
return None when a key is missing or holds a value of another type.
"""

from __future__ import annotations

from .errors import ConfigFileNotFoundError, ConfigParseError, LoadStatus
from .store import ConfigStore
from .values import ConfigValue

__all__ = [
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "ConfigStore",
    "ConfigValue",
    "LoadStatus",
    "add_search_path",
    "default_store",
    "get",
    "get_array",
    "get_bool",
    "get_float32",
    "get_float64",
    "get_float_array",
    "get_int16",
    "get_int32",
    "get_int64",
    "get_int8",
    "get_int_array",
    "get_map",
    "get_string",
    "get_string_array",
    "load",
    "set_file_name",
]

_store = ConfigStore()


def default_store() -> ConfigStore:
    """Return the process-wide store behind the module-level functions."""
    return _store


def _reset() -> None:
    """Replace the process-wide store with an empty one (for testing only)."""
    global _store
    _store = ConfigStore()


def set_file_name(name: str) -> None:
    _store.set_file_name(name)


def add_search_path(path: str) -> None:
    _store.add_search_path(path)


def load(strict: bool = False) -> LoadStatus:
    return _store.load(strict=strict)


def get(key: str) -> ConfigValue:
    return _store.get(key)


def get_string(key: str) -> str | None:
    return _store.get_string(key)


def get_string_array(key: str) -> list[str] | None:
    return _store.get_string_array(key)


def get_bool(key: str) -> bool | None:
    return _store.get_bool(key)


def get_int8(key: str) -> int | None:
    return _store.get_int8(key)


def get_int16(key: str) -> int | None:
    return _store.get_int16(key)


def get_int32(key: str) -> int | None:
    return _store.get_int32(key)


def get_int64(key: str) -> int | None:
    return _store.get_int64(key)


def get_int_array(key: str) -> list[int] | None:
    return _store.get_int_array(key)


def get_float32(key: str) -> float | None:
    return _store.get_float32(key)


def get_float64(key: str) -> float | None:
    return _store.get_float64(key)


def get_float_array(key: str) -> list[float] | None:
    return _store.get_float_array(key)


def get_array(key: str) -> list[dict[str, ConfigValue]] | None:
    return _store.get_array(key)


def get_map(key: str) -> dict[str, ConfigValue] | None:
    return _store.get_map(key)
