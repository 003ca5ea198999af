"""
Backend services for the profile service.
"""

from . import user_service

__all__ = [
    "user_service",
]
