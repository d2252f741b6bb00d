"""WordFinder - whole-word search across document trees."""

__version__ = "0.1.0"
