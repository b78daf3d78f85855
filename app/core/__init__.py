"""Core app configuration, database, security and errors."""

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.errors import ApiError

__all__ = ["ApiError", "Settings", "get_settings", "get_db"]
