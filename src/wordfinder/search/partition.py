"""Splitting of a directory listing into per-worker slices."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from wordfinder.models import WorkSlice


def partition_remainder(entries: Sequence[Path], worker_count: int) -> List[WorkSlice]:
    """Split into ``worker_count`` equal slices plus a trailing remainder slice.

    Always returns ``worker_count + 1`` slices. When the listing is shorter
    than ``worker_count`` every entry lands in the last slice.
    """
    size = len(entries) // worker_count
    slices = []
    for i in range(worker_count + 1):
        start = i * size
        end = len(entries) if i == worker_count else (i + 1) * size
        slices.append(WorkSlice(index=i + 1, entries=tuple(entries[start:end])))
    return slices


def partition_balanced(entries: Sequence[Path], worker_count: int) -> List[WorkSlice]:
    """Split into ``worker_count`` contiguous slices differing in size by at most one."""
    size, extra = divmod(len(entries), worker_count)
    slices = []
    start = 0
    for i in range(worker_count):
        end = start + size + (1 if i < extra else 0)
        slices.append(WorkSlice(index=i + 1, entries=tuple(entries[start:end])))
        start = end
    return slices


_STRATEGIES = {
    "balanced": partition_balanced,
    "remainder": partition_remainder,
}


def partition(entries: Sequence[Path], worker_count: int, strategy: str = "balanced") -> List[WorkSlice]:
    """Partition ``entries`` so that every entry belongs to exactly one slice.

    Raises:
        ValueError: If ``worker_count`` is below one or ``strategy`` is unknown.
    """
    if worker_count < 1:
        raise ValueError(f"worker_count must be at least 1, got {worker_count}")
    try:
        splitter = _STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"Unknown partition strategy: {strategy}") from None
    return splitter(entries, worker_count)
