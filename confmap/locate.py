"""Config file resolution.

Resolution order:
1. ``search_path + file_name`` if that is a regular file
2. the first entry named ``file_name`` in the directory of the running program
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def normalize_search_path(path: str) -> str:
    """Return ``path`` with a trailing platform separator.

    An empty path stays empty and means the working directory.
    """
    if not path or path.endswith(os.sep):
        return path
    return path + os.sep


def executable_dir() -> Path:
    """Directory of the running program.

    For a Python process this is the directory of the script in
    ``sys.argv[0]``; interactive sessions and embedded interpreters fall back
    to the directory of the interpreter itself.
    """
    script = sys.argv[0] if sys.argv else ""
    if script and os.path.isfile(script):
        return Path(script).resolve().parent
    return Path(sys.executable).resolve().parent


def scan_directory(directory: Path, file_name: str) -> Optional[str]:
    """Return the search path of the first entry in ``directory`` named ``file_name``.

    Entry order is whatever the filesystem reports; the first match wins.
    """
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.name == file_name:
                    parent = os.path.dirname(entry.path)
                    logger.debug("Found %s in %s", file_name, parent)
                    return normalize_search_path(parent)
    except OSError as e:
        logger.warning("Could not scan %s for %s: %s", directory, file_name, e)
    return None


def resolve_config_file(file_name: str, search_path: str) -> Optional[tuple[str, str]]:
    """Resolve the config file location.

    Returns
    -------
    tuple of (str, str) or None
        ``(full_path, search_path)`` where ``search_path`` is the directory
        the file was found in, or None when no candidate exists.
    """
    candidate = search_path + file_name
    if os.path.isfile(candidate):
        return candidate, search_path

    fallback_dir = executable_dir()
    logger.debug("%s is not a file, scanning %s", candidate, fallback_dir)
    found = scan_directory(fallback_dir, file_name)
    if found is None:
        return None
    return found + file_name, found
