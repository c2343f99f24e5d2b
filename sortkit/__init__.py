"""In-place sorting algorithms and sequence helpers with custom comparators."""

__version__ = "0.1.0"
__all__ = ["algorithms", "classic", "demo", "sorters"]