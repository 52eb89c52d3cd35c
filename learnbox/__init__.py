"""Small tools for text search, concurrency and HTTP serving."""

__version__ = "0.1.0"