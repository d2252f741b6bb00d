"""Recursive search of one work slice."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Iterable, Set

from wordfinder.extraction import ContentExtractor
from wordfinder.models import LogEntry, WorkerStats, WorkSlice
from wordfinder.search.counter import OccurrenceCounter
from wordfinder.search.log_writer import OccurrenceLogWriter
from wordfinder.utils.files import is_empty_file, list_entries
from wordfinder.utils.text import count_occurrences

LOGGER = logging.getLogger(__name__)


class SliceSearcher:
    """Walks the entries of a slice on the calling thread.

    Subdirectories are searched depth-first by the same worker, following
    symlinks but never entering the same real directory twice. Matches are
    added to the shared counter and appended to the worker's log file.
    """

    def __init__(
        self,
        word: str,
        extractor: ContentExtractor,
        counter: OccurrenceCounter,
        log_writer: OccurrenceLogWriter,
        *,
        root: Path | None = None,
        cancel_event: threading.Event | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.word = word
        self.root = root
        self.extractor = extractor
        self.counter = counter
        self.log_writer = log_writer
        self.cancel_event = cancel_event or threading.Event()
        self.logger = logger or LOGGER

    def search(self, work_slice: WorkSlice) -> WorkerStats:
        stats = WorkerStats()
        visited: Set[Path] = set()
        if self.root is not None:
            real_root = self._real_path(self.root)
            if real_root is not None:
                visited.add(real_root)
        self._search_entries(work_slice.entries, stats, visited)
        return stats

    def _search_entries(
        self, entries: Iterable[Path], stats: WorkerStats, visited: Set[Path]
    ) -> None:
        for entry in entries:
            if self.cancel_event.is_set():
                self.logger.debug("Search cancelled before %s", entry)
                return
            try:
                is_file = entry.is_file()
                is_dir = not is_file and entry.is_dir()
            except OSError as exc:
                self.logger.info("Cannot inspect %s: %s", entry, exc)
                continue
            if is_file:
                self._search_file(entry, stats)
            elif is_dir:
                real = self._real_path(entry)
                if real is None or real in visited:
                    self.logger.debug("Skipping already visited directory %s", entry)
                    continue
                visited.add(real)
                self._search_entries(list_entries(entry), stats, visited)

    def _real_path(self, path: Path) -> Path | None:
        try:
            return path.resolve()
        except (OSError, RuntimeError) as exc:
            self.logger.info("Cannot resolve %s: %s", path, exc)
            return None

    def _search_file(self, path: Path, stats: WorkerStats) -> None:
        if is_empty_file(path):
            return
        stats.scanned += 1
        absolute = path.absolute()
        try:
            text = self.extractor.extract(path)
        except Exception as exc:
            self.logger.info("Error while parsing file: %s (%s)", absolute, exc)
            stats.failed += 1
            return

        occurrences = count_occurrences(text, self.word)
        if occurrences == 0:
            return

        stats.matched += 1
        self.logger.info("%s: %d occurrences", absolute, occurrences)
        self.counter.add(occurrences)
        self.log_writer.append(LogEntry(path=absolute, count=occurrences))
