"""The config store: one JSON file, parsed into a lock-guarded table."""

from __future__ import annotations

import copy
import logging
import threading
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

from .errors import ConfigFileNotFoundError, ConfigParseError, LoadStatus
from .locate import normalize_search_path, resolve_config_file
from .values import (
    ConfigValue,
    as_float64,
    as_int64,
    narrow_float32,
    narrow_int,
    parse_document,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConfigStore:
    """Key/value view of a JSON config file.

    Every operation, reads included, holds the store's lock. Loads merge into
    the existing table: keys from the new document overwrite, keys missing
    from it are kept.
    """

    def __init__(self, file_name: str = "", search_path: str = "", encoding: str = "utf-8") -> None:
        self._lock = threading.Lock()
        self._file_name = file_name
        self._search_path = normalize_search_path(search_path)
        self._encoding = encoding
        self._table: dict[str, ConfigValue] = {}

    @property
    def file_name(self) -> str:
        with self._lock:
            return self._file_name

    @property
    def search_path(self) -> str:
        with self._lock:
            return self._search_path

    def set_file_name(self, name: str) -> None:
        with self._lock:
            self._file_name = name

    def add_search_path(self, path: str) -> None:
        """Set the directory searched first. Only one path is kept; "" clears it."""
        with self._lock:
            self._search_path = normalize_search_path(path)

    def load(self, strict: bool = False) -> LoadStatus:
        """Locate, parse and merge the config file.

        Failures leave the table unchanged and are reported through the
        returned status. With ``strict=True`` they raise instead.

        Raises
        ------
        ConfigFileNotFoundError
            ``strict`` and no config file was found.
        ConfigParseError
            ``strict`` and the file is unreadable, malformed, or not a JSON
            object.
        """
        with self._lock:
            file_name = self._file_name
            search_path = self._search_path

        if not file_name:
            logger.debug("No config file name set, skipping load")
            return LoadStatus.NOT_CONFIGURED

        resolved = resolve_config_file(file_name, search_path)
        if resolved is None:
            logger.warning("Config file %s not found", search_path + file_name)
            if strict:
                raise ConfigFileNotFoundError(f"Config file not found: {search_path + file_name}")
            return LoadStatus.NOT_FOUND

        path, found_in = resolved
        if found_in != search_path:
            with self._lock:
                self._search_path = found_in

        logger.info("Reading config file %s", path)
        try:
            document = parse_document(Path(path).read_text(encoding=self._encoding))
        except (OSError, ValueError) as e:
            # UnicodeDecodeError and JSONDecodeError are both ValueErrors
            logger.warning("Ignoring config file %s: %s", path, e)
            if strict:
                raise ConfigParseError(path, str(e)) from e
            return LoadStatus.PARSE_ERROR

        with self._lock:
            self._table.update(document)
        logger.debug("Loaded %d keys from %s", len(document), path)
        return LoadStatus.LOADED

    def _read(self, key: str, convert: Callable[[Any], Optional[T]]) -> Optional[T]:
        with self._lock:
            if key not in self._table:
                return None
            return convert(self._table[key])

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._table)

    def to_dict(self) -> dict[str, ConfigValue]:
        """Deep copy of the whole table."""
        with self._lock:
            return copy.deepcopy(self._table)

    def get(self, key: str) -> ConfigValue:
        """Return a copy of the raw value, or None if ``key`` is absent."""
        return self._read(key, copy.deepcopy)

    def get_string(self, key: str) -> Optional[str]:
        return self._read(key, lambda v: v if isinstance(v, str) else None)

    def get_bool(self, key: str) -> Optional[bool]:
        return self._read(key, lambda v: v if isinstance(v, bool) else None)

    def _get_int(self, key: str, width: int) -> Optional[int]:
        def convert(value: Any) -> Optional[int]:
            number = as_int64(value)
            if number is None:
                return None
            return narrow_int(number, width)

        return self._read(key, convert)

    def get_int8(self, key: str) -> Optional[int]:
        """Read an integer narrowed to 8 bits. Out-of-range values wrap."""
        return self._get_int(key, 8)

    def get_int16(self, key: str) -> Optional[int]:
        """Read an integer narrowed to 16 bits. Out-of-range values wrap."""
        return self._get_int(key, 16)

    def get_int32(self, key: str) -> Optional[int]:
        """Read an integer narrowed to 32 bits. Out-of-range values wrap."""
        return self._get_int(key, 32)

    def get_int64(self, key: str) -> Optional[int]:
        return self._get_int(key, 64)

    def get_float64(self, key: str) -> Optional[float]:
        return self._read(key, as_float64)

    def get_float32(self, key: str) -> Optional[float]:
        def convert(value: Any) -> Optional[float]:
            number = as_float64(value)
            if number is None:
                return None
            return narrow_float32(number)

        return self._read(key, convert)

    def _get_list(self, key: str, convert: Callable[[Any], Any]) -> Optional[list]:
        def filtered(value: Any) -> Optional[list]:
            if not isinstance(value, list):
                return None
            converted = (convert(element) for element in value)
            return [element for element in converted if element is not None]

        return self._read(key, filtered)

    def get_string_array(self, key: str) -> Optional[list[str]]:
        """Read the string elements of an array, skipping everything else."""
        return self._get_list(key, lambda v: v if isinstance(v, str) else None)

    def get_int_array(self, key: str) -> Optional[list[int]]:
        """Read the 64-bit integer elements of an array, skipping everything else."""
        return self._get_list(key, as_int64)

    def get_float_array(self, key: str) -> Optional[list[float]]:
        """Read the numeric elements of an array as floats, skipping everything else."""
        return self._get_list(key, as_float64)

    def get_array(self, key: str) -> Optional[list[dict[str, ConfigValue]]]:
        """Read the object elements of an array, skipping scalars and nested arrays."""
        return self._get_list(key, lambda v: copy.deepcopy(v) if isinstance(v, dict) else None)

    def get_map(self, key: str) -> Optional[dict[str, ConfigValue]]:
        return self._read(key, lambda v: copy.deepcopy(v) if isinstance(v, dict) else None)
