"""Reflective property metadata and a blocking memoizing cache."""

__version__ = "0.1.0"
