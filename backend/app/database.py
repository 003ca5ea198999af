"""
Database session and base configuration.

Re-exports from accounts.db. Initialization happens explicitly in main.py
startup, not at import time.
"""

from accounts.db import Base, db, get_db

__all__ = ["Base", "db", "get_db"]
