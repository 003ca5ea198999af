"""
Application configuration using Pydantic settings.

Re-exports from accounts.config so backend modules can use relative imports.
"""

from accounts.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
