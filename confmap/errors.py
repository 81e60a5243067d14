"""Load outcomes and the exceptions raised by strict loads."""

from __future__ import annotations

from enum import Enum


class LoadStatus(Enum):
    LOADED = "loaded"
    NOT_CONFIGURED = "not_configured"
    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"

    def __bool__(self) -> bool:
        return self is LoadStatus.LOADED


class ConfigFileNotFoundError(FileNotFoundError):
    """The config file was found neither on the search path nor beside the program."""


class ConfigParseError(ValueError):
    """The config file could not be read or is not a JSON object."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to parse config file {path}: {reason}")
        self.path = path
        self.reason = reason
