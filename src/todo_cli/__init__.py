"""Personal task tracker with a JSON-file store and a small query language."""

__version__ = "0.1.0"
