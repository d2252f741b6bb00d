"""Per-worker occurrence logs."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List

from wordfinder.models import LogEntry

LOGGER = logging.getLogger(__name__)


class OccurrenceLogWriter:
    """Append-only writer for the log file owned by a single worker."""

    def __init__(self, path: Path, logger: logging.Logger | None = None) -> None:
        self.path = Path(path)
        self.logger = logger or LOGGER
        self.written = 0

    def append(self, entry: LogEntry) -> bool:
        """Append ``entry`` as one line, returning ``False`` if the write failed."""
        try:
            with self.path.open("a", encoding="utf-8", errors="surrogateescape") as handle:
                handle.write(entry.format_line())
        except (OSError, UnicodeError) as exc:
            self.logger.info("Error while writing to log file %s: %s", self.path, exc)
            return False
        self.written += 1
        return True


def read_log_directory(
    log_directory: Path, *, prefix: str = "logfile_", suffix: str = ".txt"
) -> List[LogEntry]:
    """Collect the entries of every worker log in ``log_directory``.

    Files are read in worker-index order; lines that do not parse are skipped.
    """
    log_directory = Path(log_directory)
    if not log_directory.is_dir():
        return []

    name_re = re.compile(rf"^{re.escape(prefix)}(\d+){re.escape(suffix)}$")
    indexed = []
    for path in log_directory.iterdir():
        match = name_re.match(path.name)
        if match and path.is_file():
            indexed.append((int(match.group(1)), path))

    entries: List[LogEntry] = []
    for _, path in sorted(indexed):
        try:
            with path.open("r", encoding="utf-8", errors="surrogateescape") as handle:
                lines = handle.readlines()
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.warning("Skipping unreadable log file %s: %s", path, exc)
            continue
        for line in lines:
            if not line.strip():
                continue
            try:
                entries.append(LogEntry.parse(line))
            except ValueError:
                LOGGER.debug("Skipping malformed line in %s: %r", path, line)
    return entries
