"""Content extraction backends."""

from wordfinder.extraction.extractor import ContentExtractor, DefaultExtractor, ExtractionError

__all__ = ["ContentExtractor", "DefaultExtractor", "ExtractionError"]
