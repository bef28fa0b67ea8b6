"""Parameterized query execution layer for embedded SQLite database files."""

__version__ = "0.1.0"
