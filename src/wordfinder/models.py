"""Core WordFinder data models."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

_LINE_RE = re.compile(r"^(?P<path>.+): (?P<count>\d+) occurrences$")


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """Parameters of a single search invocation."""

    root: Path
    word: str
    log_directory: Path

    def __post_init__(self) -> None:
        if not self.word or not self.word.strip():
            raise ValueError("Search word must not be blank")
        object.__setattr__(self, "root", Path(self.root))
        object.__setattr__(self, "word", self.word.strip())
        object.__setattr__(self, "log_directory", Path(self.log_directory))


@dataclass(frozen=True, slots=True)
class WorkSlice:
    """Contiguous run of top-level entries assigned to one worker."""

    index: int
    entries: Tuple[Path, ...]

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One line of a worker log file."""

    path: Path
    count: int

    def format_line(self) -> str:
        return f"{self.path}: {self.count} occurrences\n"

    @classmethod
    def parse(cls, line: str) -> "LogEntry":
        """Parse a line produced by :meth:`format_line`.

        Raises:
            ValueError: If the line does not follow the log format.
        """
        match = _LINE_RE.match(line.rstrip("\r\n"))
        if match is None:
            raise ValueError(f"Malformed log line: {line!r}")
        return cls(path=Path(match.group("path")), count=int(match.group("count")))


@dataclass(slots=True)
class WorkerStats:
    """Counters collected by a single worker."""

    scanned: int = 0
    matched: int = 0
    failed: int = 0


@dataclass(slots=True)
class SearchReport:
    """Outcome of one search invocation."""

    total: int = 0
    scanned: int = 0
    matched: int = 0
    failed: int = 0
    slices_dispatched: int = 0
    timed_out: bool = False
    not_directory: bool = False
    log_files: List[Path] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.total > 0

    def merge(self, stats: WorkerStats) -> None:
        self.scanned += stats.scanned
        self.matched += stats.matched
        self.failed += stats.failed
