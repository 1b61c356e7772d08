"""Core app configuration, database and errors."""

from fzscripts.core.config import get_settings, settings
from fzscripts.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
