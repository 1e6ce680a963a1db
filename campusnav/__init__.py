"""Campus navigation on a weighted graph of locations and roads, with an interactive console."""

__version__ = "0.1.0"
__all__ = ["graph", "algorithms", "cli"]