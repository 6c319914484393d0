"""Classic data structures and small algorithms: trees, graphs, hashing, lists and scheduling."""

__version__ = "0.1.0"