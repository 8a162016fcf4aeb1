"""
Application configuration using Pydantic settings.

Re-exports from the unified rivix_core.config module so routers and
middleware can keep importing from the app package:
    from .config import get_settings, Settings
"""

from rivix_core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
