"""Infrastructure layer - Configuration"""

from .config import Settings, get_settings, reload_settings

__all__ = ["Settings", "get_settings", "reload_settings"]
