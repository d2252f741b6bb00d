"""Partitioned, multi-threaded word search."""

from wordfinder.search.dispatcher import SearchDispatcher
from wordfinder.search.partition import partition

__all__ = ["SearchDispatcher", "partition"]
