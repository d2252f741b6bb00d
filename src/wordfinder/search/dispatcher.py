"""Fan-out of a search request over a bounded thread pool."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Dict

from wordfinder.config import AppConfig
from wordfinder.extraction import ContentExtractor, DefaultExtractor
from wordfinder.models import SearchReport, SearchRequest
from wordfinder.search.counter import OccurrenceCounter
from wordfinder.search.log_writer import OccurrenceLogWriter
from wordfinder.search.partition import partition
from wordfinder.search.searcher import SliceSearcher
from wordfinder.utils.files import ensure_directory, list_entries

LOGGER = logging.getLogger(__name__)


class SearchDispatcher:
    """Coordinates partitioning, worker submission and pool shutdown."""

    def __init__(
        self,
        config: AppConfig | None = None,
        extractor: ContentExtractor | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.extractor = extractor or DefaultExtractor()
        self.logger = logger or LOGGER

    def run(self, request: SearchRequest) -> SearchReport:
        """Search ``request.root`` and return the aggregated report.

        Raises:
            KeyboardInterrupt: If interrupted while waiting for the workers;
                remaining work is cancelled first.
        """
        report = SearchReport()
        if not request.root.is_dir():
            self.logger.info("Provided path is not a directory: %s", request.root)
            report.not_directory = True
            return report

        ensure_directory(request.log_directory)

        entries = list_entries(request.root)
        slices = [
            work_slice
            for work_slice in partition(entries, self.config.worker_count, self.config.strategy)
            if work_slice.entries
        ]
        self.logger.debug(
            "Dispatching %d entries over %d slices", len(entries), len(slices)
        )

        counter = OccurrenceCounter()
        cancel_event = threading.Event()
        executor = ThreadPoolExecutor(
            max_workers=self.config.worker_count, thread_name_prefix="wordfinder"
        )
        futures: Dict[Future, OccurrenceLogWriter] = {}
        for work_slice in slices:
            writer = OccurrenceLogWriter(
                request.log_directory / self.config.log_file_name(work_slice.index),
                logger=self.logger,
            )
            searcher = SliceSearcher(
                request.word,
                self.extractor,
                counter,
                writer,
                root=request.root,
                cancel_event=cancel_event,
                logger=self.logger,
            )
            futures[executor.submit(searcher.search, work_slice)] = writer

        report.slices_dispatched = len(futures)
        report.timed_out = self._shutdown(executor, futures, cancel_event)

        for future, writer in futures.items():
            if future.done() and not future.cancelled():
                exc = future.exception()
                if exc is not None:
                    self.logger.error("Worker for %s failed: %s", writer.path.name, exc)
                else:
                    report.merge(future.result())
            if writer.written:
                report.log_files.append(writer.path)

        report.total = counter.value
        if report.total == 0:
            self.logger.info("No occurrences found for the specified string: %s", request.word)
        return report

    def _shutdown(
        self,
        executor: ThreadPoolExecutor,
        futures: Dict[Future, OccurrenceLogWriter],
        cancel_event: threading.Event,
    ) -> bool:
        """Drain the pool within the grace period. Returns ``True`` on timeout."""
        executor.shutdown(wait=False)
        try:
            _, not_done = wait(futures, timeout=self.config.shutdown_timeout)
        except KeyboardInterrupt:
            self.logger.warning("Interrupted while waiting for workers, cancelling")
            self._force_shutdown(executor, cancel_event)
            raise

        if not_done:
            self.logger.warning(
                "%d worker(s) still running after %.1fs, cancelling",
                len(not_done),
                self.config.shutdown_timeout,
            )
            self._force_shutdown(executor, cancel_event)
            return True
        return False

    @staticmethod
    def _force_shutdown(executor: ThreadPoolExecutor, cancel_event: threading.Event) -> None:
        cancel_event.set()
        executor.shutdown(wait=False, cancel_futures=True)
