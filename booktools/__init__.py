"""Markdown book helpers: message extraction, PO catalogs, translation, exercise files and worked exercises."""

__version__ = "0.1.0"