"""A hash set with a consistent, index-addressable order of values, with slices and ordered set algebra."""

__version__ = "0.1.0"

__all__ = ["indexset", "iterators", "ranges", "setops", "slice"]