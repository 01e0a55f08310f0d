"""Movie and review registry over an ordered in-memory key-value store."""

__version__ = "0.1.0"