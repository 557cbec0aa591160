"""Console workbenches for queues, search trees, hash tables and graphs."""

__version__ = "0.1.0"