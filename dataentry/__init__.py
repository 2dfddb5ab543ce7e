"""Simple Data Entry: a name/age form backed by a local SQLite store."""

__version__ = "0.1.0"
