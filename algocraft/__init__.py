"""Classic algorithms and data structures: graphs, trees, heaps, hashing, coding, clustering and sorting."""

__version__ = "0.1.0"