"""Core: config, constants, and composition of the services.

Single place for settings and shared constants.
"""

from admin_core.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
