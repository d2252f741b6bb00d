"""Utility helpers for working with files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

LOGGER = logging.getLogger(__name__)


def list_entries(directory: Path) -> List[Path]:
    """Return the entries of ``directory`` sorted by name.

    A directory that cannot be listed (permissions, concurrent deletion)
    yields an empty list.
    """
    try:
        return sorted(directory.iterdir())
    except OSError as exc:
        LOGGER.info("Cannot list directory %s: %s", directory, exc)
        return []


def ensure_directory(path: Path) -> bool:
    """Create ``path`` and its parents, returning whether it is usable.

    An already existing directory counts as success.
    """
    if path.is_dir():
        LOGGER.info("Log directory already exists at: %s", path)
        return True
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        LOGGER.warning("Failed to create log directories at: %s (%s)", path, exc)
        return False
    LOGGER.info("Log directories created successfully at: %s", path)
    return True


def is_empty_file(path: Path) -> bool:
    try:
        return path.stat().st_size == 0
    except OSError:
        return False
