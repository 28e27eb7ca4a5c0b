"""
Planetas

Single-table planet record manager backed by a local SQLite file.
"""

__version__ = "1.0.0"
