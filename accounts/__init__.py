"""
Profile Service core library.

Database management, models, repositories, password hashing and logging
shared by the HTTP backend.

Usage:
    from accounts.db import db, get_db
    from accounts.models import User
    from accounts.repositories import UserRepository
    from accounts.config import get_settings
    from accounts.logging import get_logger
"""

__version__ = "1.0.0"
