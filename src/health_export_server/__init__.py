"""Ingestion server for Health Auto Export documents."""

__version__ = "1.0.0"
