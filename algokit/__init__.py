"""Classic algorithms: dynamic programming, graph traversal and sorting."""

__version__ = "0.1.0"
__all__ = ["dynamic", "graph", "sorting"]