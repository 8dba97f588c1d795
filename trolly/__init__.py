"""Trolly: a URI-addressed content store for a SQLite shopping list."""

__version__ = "0.2.0"
